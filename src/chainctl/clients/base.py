"""BaseCliClient: shared invocation plumbing for the command clients.

Every client receives a :class:`CommandRunner` and the ``[node]`` config at
construction time. ``_invoke`` turns a binary invocation into a
CommandResult so callers never see process-level exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from chainctl.clients.runner import BinaryNotFoundError, CommandRunner, CompletedCommand
from chainctl.config.models import BinariesConfig, NodeConfig
from chainctl.services.result import CommandResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseCliClient:
    """Abstract base for clients wrapping one group of node commands."""

    def __init__(self, runner: CommandRunner, node: NodeConfig | None = None) -> None:
        self._runner = runner
        self._node = node or NodeConfig()

    @property
    def binaries(self) -> BinariesConfig:
        return self._runner.locator.config

    def _chain_args(self, chain_name: str) -> list[str]:
        """Positional chain name plus the optional ``-datadir`` flag."""
        args = [chain_name]
        if self._node.data_dir is not None:
            args.append(f"-datadir={self._node.data_dir}")
        return args

    async def _invoke(
        self,
        op: str,
        binary: str,
        args: list[str],
        parse: Callable[[CompletedCommand], T],
        *,
        detach: bool = False,
    ) -> CommandResult[T]:
        """Run *binary* and map the outcome to a CommandResult.

        *parse* builds the payload from a successful invocation; a
        ``ValueError`` raised by it becomes an ``INVALID_RESPONSE`` failure.
        *detach* is passed to the runner for commands that daemonize.
        """
        try:
            completed = await self._runner.run(binary, *args, detach=detach)
        except BinaryNotFoundError as exc:
            return CommandResult.failure(
                op,
                "BINARY_NOT_FOUND",
                str(exc),
                detail={"binary": exc.binary, "searched": list(exc.searched)},
            )
        except OSError as exc:
            logger.warning("Failed to spawn %s", binary, exc_info=True)
            return CommandResult.failure(op, "EXECUTION_ERROR", str(exc), detail={"binary": binary})

        meta = {"argv": list(completed.argv), "returncode": completed.returncode}
        if not completed.ok:
            return CommandResult.failure(op, "COMMAND_FAILED", completed.message, meta=meta)

        try:
            payload = parse(completed)
        except ValueError as exc:
            return CommandResult.failure(
                op,
                "INVALID_RESPONSE",
                f"Unexpected output from {binary}: {exc}",
                detail={"stdout": completed.stdout},
                meta=meta,
            )
        return CommandResult.success(op, payload, meta=meta)

    @staticmethod
    def _require_name(op: str, chain_name: str | None) -> CommandResult[T] | None:
        """Return a failure result when *chain_name* is missing, else None."""
        if chain_name and chain_name.strip():
            return None
        return CommandResult.failure(
            op, "CHAIN_NAME_REQUIRED", "A blockchain name is required for this operation"
        )
