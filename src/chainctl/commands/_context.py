"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy client-factory resolution and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any, TypeVar

import click

from chainctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from chainctl.clients.factory import CliClientFactory
    from chainctl.config.settings import ChainSettings
    from chainctl.services.result import CommandResult

T = TypeVar("T")


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The client factory is
    resolved lazily on first use so ``--help`` and ``--version`` never
    touch the service registry.
    """

    def __init__(self, settings: ChainSettings) -> None:
        self.settings = settings

        from chainctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def factory(self) -> CliClientFactory:
        """The command-client factory from the process-wide registry."""
        from chainctl.clients.factory import CliClientFactory
        from chainctl.services.registry import ServiceUnavailable, get_registry

        try:
            return get_registry(self.settings).resolve(CliClientFactory)
        except ServiceUnavailable as exc:
            raise click.ClickException(str(exc)) from exc

    def default_chain_name(self, fallback: str | None = None) -> str | None:
        """Configured ``[node] chain_name``, else *fallback*."""
        return self.settings.node.chain_name or fallback

    def run(self, coro: Coroutine[Any, Any, T]) -> T:
        """Drive *coro* to completion on a fresh event loop."""
        return asyncio.run(coro)

    def emit(self, result: CommandResult[Any]) -> None:
        """Format and output a CommandResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
