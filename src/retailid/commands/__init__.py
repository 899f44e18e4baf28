"""Subcommand modules for retailid.

Provides register_commands() which uses deferred imports to keep
``retailid --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from retailid.commands.convert import convert
    from retailid.commands.encode import encode
    from retailid.commands.generate import generate
    from retailid.commands.resolve import resolve

    cli.add_command(resolve)
    cli.add_command(encode)
    cli.add_command(generate)
    cli.add_command(convert)
