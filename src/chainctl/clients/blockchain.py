"""BlockchainClient: read-only queries against a running node."""

from __future__ import annotations

import json
import os

from chainctl.clients.base import BaseCliClient
from chainctl.clients.runner import CompletedCommand
from chainctl.domain.info import BlockchainInfo
from chainctl.services.result import CommandResult

# Legacy environment key consulted when no name is given or configured.
CHAIN_NAME_ENV_VAR = "ChainName"


class BlockchainClient(BaseCliClient):
    """Queries issued through ``multichain-cli``.

    The chain name may be omitted; it is then inferred from ``[node]
    chain_name`` (TOML or ``CHAINCTL_NODE__CHAIN_NAME``) and finally from
    the ``ChainName`` environment variable.
    """

    def infer_chain_name(self, chain_name: str | None = None) -> str | None:
        if chain_name:
            return chain_name
        if self._node.chain_name:
            return self._node.chain_name
        return os.environ.get(CHAIN_NAME_ENV_VAR) or None

    async def get_blockchain_info(
        self, chain_name: str | None = None
    ) -> CommandResult[BlockchainInfo]:
        """Run ``getblockchaininfo`` and parse the JSON response."""
        op = "get_blockchain_info"
        name = self.infer_chain_name(chain_name) or ""
        missing = self._require_name(op, name)
        if missing is not None:
            return missing
        args = [*self._chain_args(name), "getblockchaininfo"]
        return await self._invoke(op, self.binaries.cli, args, _parse_info)


def _parse_info(completed: CompletedCommand) -> BlockchainInfo:
    data = json.loads(completed.stdout)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return BlockchainInfo.model_validate(data)
