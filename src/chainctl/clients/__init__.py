"""Command clients for the MultiChain Core binaries.

Every client operation returns a CommandResult. Expected process failures
(missing binary, non-zero exit, unparseable output) are failures, never
exceptions.
"""

from chainctl.clients.blockchain import BlockchainClient
from chainctl.clients.factory import CliClientFactory
from chainctl.clients.forge import ForgeClient
from chainctl.clients.runner import BinaryLocator, BinaryNotFoundError, CommandRunner

__all__ = [
    "BinaryLocator",
    "BinaryNotFoundError",
    "BlockchainClient",
    "CliClientFactory",
    "CommandRunner",
    "ForgeClient",
]
