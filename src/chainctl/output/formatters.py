"""Human and JSON rendering of CommandResult.

The CLI renders CommandResult for humans (Rich output) or machines
(--json). Quiet mode reduces output to a single status line.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from chainctl.domain.info import BlockchainInfo
from chainctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from chainctl.services.result import CommandResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _payload_fields(payload: Any) -> list[tuple[str, Any]]:
    if isinstance(payload, BlockchainInfo):
        return payload.populated_fields()
    if isinstance(payload, BaseModel):
        return list(payload.model_dump(exclude_none=True).items())
    if isinstance(payload, dict):
        return list(payload.items())
    return [("result", payload)]


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _error_line(result: CommandResult[Any]) -> str:
    msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} — {msg}"


def format_result(
    result: CommandResult[Any],
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a CommandResult for display.

    Args:
        result: The command result to format.
        settings: Output mode; defaults to human-readable output.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return f"OK: {result.op}" if result.ok else _error_line(result)

    console = create_console()
    if result.ok:
        console.print(Text("OK", style="chain.ok"), Text(f"  {result.op}", style="chain.op"))
        for key, value in _payload_fields(result.result):
            if key == "output" and not value:
                continue
            console.print(Text(f"  {key}: ", style="chain.key"), Text(_format_value(value)), sep="")
    else:
        console.print(Text(_error_line(result), style="chain.error"))
        if settings.verbose and result.error is not None:
            console.print(Text(f"  code: {result.error.code}", style="chain.code"))
            for key, value in result.error.detail.items():
                console.print(Text(f"  {key}: {_format_value(value)}", style="chain.key"))

    if settings.verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for key, value in result.meta.items():
            console.print(Text(f"    {key}: {_format_value(value)}"))

    return get_output(console).rstrip("\n")
