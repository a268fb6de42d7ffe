"""Click building blocks shared by the chainctl commands.

``ChainCommand`` and ``ChainGroup`` take an ``examples`` string that is
printed by an eager ``--examples`` flag, keeping ``--help`` short.
``chain_name_argument`` is the positional NAME used by every lifecycle
command.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

F = Callable[..., Any]


def _examples_callback(examples: str) -> Callable[[click.Context, click.Parameter, bool], None]:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return callback


def _examples_option(examples: str) -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_examples_callback(examples),
        help="Show usage examples.",
    )


class ChainCommand(click.Command):
    """Command accepting an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class ChainGroup(click.Group):
    """Group whose subcommands default to :class:`ChainCommand`."""

    command_class = ChainCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


def chain_name_argument(*, required: bool = True) -> Callable[[F], F]:
    """Positional ``CHAIN_NAME`` argument."""
    if required:
        return click.argument("chain_name")
    return click.argument("chain_name", required=False)
