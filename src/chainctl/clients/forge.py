"""ForgeClient: create, start and stop a local MultiChain blockchain.

Forge operations always take an explicit chain name; unlike the query
clients they never infer it from configuration.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from chainctl.clients.base import BaseCliClient
from chainctl.clients.runner import CompletedCommand
from chainctl.services.result import CommandResult


class ForgeClient(BaseCliClient):
    """Node lifecycle commands: create, start and stop."""

    async def create_blockchain(self, chain_name: str) -> CommandResult[dict[str, Any]]:
        """Create chain parameters for *chain_name* (``multichain-util create``)."""
        op = "create_blockchain"
        missing = self._require_name(op, chain_name)
        if missing is not None:
            return missing
        args = ["create", *self._chain_args(chain_name)]
        return await self._invoke(op, self.binaries.util, args, _forge_payload(chain_name))

    async def start_blockchain(self, chain_name: str) -> CommandResult[dict[str, Any]]:
        """Start the node for *chain_name* in daemon mode (``multichaind -daemon``)."""
        op = "start_blockchain"
        missing = self._require_name(op, chain_name)
        if missing is not None:
            return missing
        args = [*self._chain_args(chain_name), "-daemon"]
        return await self._invoke(
            op, self.binaries.daemon, args, _forge_payload(chain_name), detach=True
        )

    async def stop_blockchain(self, chain_name: str) -> CommandResult[dict[str, Any]]:
        """Ask the running node for *chain_name* to shut down (``multichain-cli stop``)."""
        op = "stop_blockchain"
        missing = self._require_name(op, chain_name)
        if missing is not None:
            return missing
        args = [*self._chain_args(chain_name), "stop"]
        return await self._invoke(op, self.binaries.cli, args, _forge_payload(chain_name))


def _forge_payload(chain_name: str) -> Callable[[CompletedCommand], dict[str, Any]]:
    def parse(completed: CompletedCommand) -> dict[str, Any]:
        return {"chain_name": chain_name, "output": completed.stdout.strip()}

    return parse
