"""Subcommand modules for chainctl.

Provides register_commands() which uses deferred imports to keep
``chainctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``chain`` group and the standalone ``demo`` command."""
    from chainctl.commands.chain import chain
    from chainctl.commands.demo import demo

    cli.add_command(chain)
    cli.add_command(demo)
