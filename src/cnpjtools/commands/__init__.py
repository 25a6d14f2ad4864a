"""Subcommand modules for cnpjtools.

register_commands() defers imports so ``cnpjtools --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from cnpjtools.commands.check_digits import check_digits
    from cnpjtools.commands.format_cmd import format_cmd
    from cnpjtools.commands.generate import generate
    from cnpjtools.commands.mask import mask
    from cnpjtools.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(mask)
    cli.add_command(format_cmd)
    cli.add_command(check_digits)
    cli.add_command(generate)
