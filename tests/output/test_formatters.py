"""Tests for format_result and OutputSettings."""

from __future__ import annotations

import json

from chainctl.domain.info import BlockchainInfo
from chainctl.output.formatters import OutputSettings, format_result
from chainctl.services.result import CommandResult


def _ok(op: str = "create_blockchain", **data: object) -> CommandResult:
    return CommandResult.success(op, dict(data) or {"chain_name": "c1", "output": ""})


def _err(op: str = "start_blockchain", msg: str = "fail") -> CommandResult:
    return CommandResult.failure(op, "COMMAND_FAILED", msg, detail={"binary": "multichaind"})


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestJson:
    def test_success(self) -> None:
        data = json.loads(format_result(_ok(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["op"] == "create_blockchain"
        assert data["result"]["chain_name"] == "c1"
        assert data["error"] is None

    def test_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["result"] is None
        assert data["error"]["message"] == "Bad"

    def test_info_payload_serialized(self) -> None:
        result = CommandResult.success("get_blockchain_info", BlockchainInfo(name="c1", height=2))
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["result"]["name"] == "c1"
        assert data["result"]["height"] == 2


class TestQuiet:
    def test_ok(self) -> None:
        assert format_result(_ok(), settings=OutputSettings(quiet=True)) == "OK: create_blockchain"

    def test_error(self) -> None:
        out = format_result(_err(msg="boom"), settings=OutputSettings(quiet=True))
        assert out == "ERROR: start_blockchain — boom"


class TestHuman:
    def test_ok_status_and_fields(self) -> None:
        out = format_result(_ok(chain_name="c1", output="done"))
        assert out.splitlines()[0].startswith("OK")
        assert "create_blockchain" in out
        assert "chain_name: c1" in out
        assert "output: done" in out

    def test_empty_output_hidden(self) -> None:
        out = format_result(_ok(chain_name="c1", output=""))
        assert "output:" not in out

    def test_info_fields(self) -> None:
        result = CommandResult.success("get_blockchain_info", BlockchainInfo(name="c1", height=0))
        out = format_result(result)
        assert "Name: c1" in out
        assert "Height: 0" in out

    def test_error_line(self) -> None:
        out = format_result(_err(msg="not running"))
        assert "ERROR: start_blockchain — not running" in out
        assert "code:" not in out

    def test_verbose_error_shows_code_and_detail(self) -> None:
        out = format_result(_err(), settings=OutputSettings(verbose=True))
        assert "code: COMMAND_FAILED" in out
        assert "binary: multichaind" in out

    def test_verbose_meta(self) -> None:
        result = CommandResult.success(
            "stop_blockchain",
            {"chain_name": "c1", "output": ""},
            meta={"argv": ["multichain-cli", "c1", "stop"], "returncode": 0},
        )
        out = format_result(result, settings=OutputSettings(verbose=True))
        assert "meta:" in out
        assert "returncode: 0" in out
        assert '"multichain-cli"' in out
