"""Command group: individual lifecycle steps for one blockchain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chainctl.commands._base import ChainGroup, chain_name_argument

if TYPE_CHECKING:
    from chainctl.commands._context import AppContext


@click.group(
    cls=ChainGroup,
    examples="""\
  chainctl chain create ExampleChain
  chainctl chain start ExampleChain
  chainctl --json chain info ExampleChain
  chainctl chain stop ExampleChain""",
)
def chain() -> None:
    """Run a single lifecycle step against a blockchain."""


@chain.command(
    examples="""\
  chainctl chain create ExampleChain
  chainctl --json chain create ExampleChain""",
)
@chain_name_argument()
@click.pass_obj
def create(app: AppContext, chain_name: str) -> None:
    """Create chain parameters for CHAIN_NAME (multichain-util create)."""
    app.emit(app.run(app.factory.forge.create_blockchain(chain_name)))


@chain.command(
    examples="""\
  chainctl chain start ExampleChain""",
)
@chain_name_argument()
@click.pass_obj
def start(app: AppContext, chain_name: str) -> None:
    """Start the node for CHAIN_NAME as a daemon."""
    app.emit(app.run(app.factory.forge.start_blockchain(chain_name)))


@chain.command(
    examples="""\
  chainctl chain info ExampleChain
  CHAINCTL_NODE__CHAIN_NAME=ExampleChain chainctl chain info
  chainctl --json chain info""",
)
@chain_name_argument(required=False)
@click.pass_obj
def info(app: AppContext, chain_name: str | None) -> None:
    """Show getblockchaininfo for CHAIN_NAME.

    When CHAIN_NAME is omitted it is inferred from [node] chain_name or
    the ChainName environment variable.
    """
    app.emit(app.run(app.factory.blockchain.get_blockchain_info(chain_name)))


@chain.command(
    examples="""\
  chainctl chain stop ExampleChain""",
)
@chain_name_argument()
@click.pass_obj
def stop(app: AppContext, chain_name: str) -> None:
    """Stop the running node for CHAIN_NAME."""
    app.emit(app.run(app.factory.forge.stop_blockchain(chain_name)))
