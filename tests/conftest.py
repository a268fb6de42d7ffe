"""Shared pytest fixtures and test doubles for chainctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from chainctl.clients.factory import CliClientFactory
from chainctl.clients.runner import BinaryLocator, CommandRunner, CompletedCommand
from chainctl.config.models import BinariesConfig
from chainctl.domain.info import BlockchainInfo
from chainctl.services import registry as registry_module
from chainctl.services.registry import ServiceRegistry, reset_registry
from chainctl.services.result import CommandResult


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no chainctl env vars or registry."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in ("CHAINCTL_CONFIG", "CHAINCTL_NODE__CHAIN_NAME", "ChainName"):
        monkeypatch.delenv(key, raising=False)

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    reset_registry()
    yield
    reset_registry()
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Fake command clients (stand in for a CliClientFactory)
# ---------------------------------------------------------------------------


class FakeForgeClient:
    def __init__(self, owner: FakeClientFactory) -> None:
        self._owner = owner

    async def create_blockchain(self, chain_name: str) -> CommandResult[dict[str, Any]]:
        return self._owner.record("create", "create_blockchain", chain_name)

    async def start_blockchain(self, chain_name: str) -> CommandResult[dict[str, Any]]:
        return self._owner.record("start", "start_blockchain", chain_name)

    async def stop_blockchain(self, chain_name: str) -> CommandResult[dict[str, Any]]:
        return self._owner.record("stop", "stop_blockchain", chain_name)


class FakeBlockchainClient:
    def __init__(self, owner: FakeClientFactory) -> None:
        self._owner = owner

    async def get_blockchain_info(
        self, chain_name: str | None = None
    ) -> CommandResult[BlockchainInfo]:
        return self._owner.record("info", "get_blockchain_info", chain_name)


class FakeClientFactory:
    """Records every call as ``(step, chain_name)``; steps in *failing* return ok=False."""

    def __init__(
        self,
        *,
        failing: set[str] | None = None,
        info: BlockchainInfo | None = None,
    ) -> None:
        self.calls: list[tuple[str, str | None]] = []
        self.failing = failing or set()
        self.info = info or BlockchainInfo(height=0, name="ExampleChain")
        self.forge = FakeForgeClient(self)
        self.blockchain = FakeBlockchainClient(self)

    @property
    def steps(self) -> list[str]:
        return [step for step, _ in self.calls]

    def record(self, step: str, op: str, chain_name: str | None) -> CommandResult[Any]:
        self.calls.append((step, chain_name))
        if step in self.failing:
            return CommandResult.failure(op, "COMMAND_FAILED", f"simulated {step} failure")
        if step == "info":
            return CommandResult.success(op, self.info)
        return CommandResult.success(op, {"chain_name": chain_name, "output": ""})


@pytest.fixture
def fake_factory() -> FakeClientFactory:
    return FakeClientFactory()


@pytest.fixture
def install_factory(monkeypatch: pytest.MonkeyPatch):
    """Install a FakeClientFactory as the process-wide CliClientFactory."""

    def install(factory: FakeClientFactory) -> FakeClientFactory:
        registry = ServiceRegistry()
        registry.register_instance(CliClientFactory, factory)
        registry.freeze()
        monkeypatch.setattr(registry_module, "_registry", registry)
        return factory

    return install


# ---------------------------------------------------------------------------
# Scripted runner (stands in for the node binaries)
# ---------------------------------------------------------------------------


class ScriptedRunner(CommandRunner):
    """CommandRunner that returns queued outcomes instead of spawning processes."""

    def __init__(self, config: BinariesConfig | None = None) -> None:
        super().__init__(BinaryLocator(config))
        self.invocations: list[tuple[str, ...]] = []
        self.detached: list[bool] = []
        self._outcomes: list[CompletedCommand | BaseException] = []

    def queue(self, *, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self._outcomes.append(
            CompletedCommand(argv=(), returncode=returncode, stdout=stdout, stderr=stderr)
        )

    def queue_error(self, exc: BaseException) -> None:
        self._outcomes.append(exc)

    async def run(self, binary: str, *args: str, detach: bool = False) -> CompletedCommand:
        self.invocations.append((binary, *args))
        self.detached.append(detach)
        outcome = self._outcomes.pop(0) if self._outcomes else None
        if isinstance(outcome, BaseException):
            raise outcome
        if outcome is None:
            return CompletedCommand(argv=(binary, *args), returncode=0, stdout="", stderr="")
        return CompletedCommand(
            argv=(binary, *args),
            returncode=outcome.returncode,
            stdout=outcome.stdout,
            stderr=outcome.stderr,
        )


@pytest.fixture
def scripted_runner() -> ScriptedRunner:
    return ScriptedRunner()
