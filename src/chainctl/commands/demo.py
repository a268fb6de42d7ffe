"""Command: the create → start → info → stop walkthrough."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chainctl.commands._base import ChainCommand, chain_name_argument

if TYPE_CHECKING:
    from chainctl.commands._context import AppContext

DEFAULT_CHAIN_NAME = "ExampleChain"


@click.command(
    cls=ChainCommand,
    examples="""\
  chainctl demo
  chainctl demo MyChain
  chainctl -v demo --log-json""",
)
@chain_name_argument(required=False)
@click.pass_obj
def demo(app: AppContext, chain_name: str | None) -> None:
    """Create, start, query and stop a blockchain named CHAIN_NAME.

    CHAIN_NAME defaults to [node] chain_name from chainctl.toml, then
    ExampleChain. The info fields are printed as ``name: value`` lines.
    A failed step aborts the run; earlier steps are not undone.
    """
    from chainctl.services.lifecycle import LifecycleOrchestrator, LifecycleStepFailed

    name = chain_name or app.default_chain_name(DEFAULT_CHAIN_NAME)
    orchestrator = LifecycleOrchestrator(app.factory)
    try:
        app.run(orchestrator.run(name))
    except LifecycleStepFailed as exc:
        raise click.ClickException(str(exc)) from exc
