"""CliClientFactory: one place to obtain every command client."""

from __future__ import annotations

from chainctl.clients.blockchain import BlockchainClient
from chainctl.clients.forge import ForgeClient
from chainctl.clients.runner import CommandRunner
from chainctl.config.models import NodeConfig


class CliClientFactory:
    """Serves the command clients, all sharing one runner and node config."""

    def __init__(self, runner: CommandRunner, node: NodeConfig | None = None) -> None:
        self.forge = ForgeClient(runner, node)
        self.blockchain = BlockchainClient(runner, node)
