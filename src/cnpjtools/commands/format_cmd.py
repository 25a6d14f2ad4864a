"""Command: format a complete 14-digit CNPJ."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cnpjtools.commands._base import CnpjCommand

if TYPE_CHECKING:
    from cnpjtools.commands._context import AppContext


@click.command(
    "format",
    cls=CnpjCommand,
    examples="""\
  cnpjtools format 11444777000161
  cnpjtools -q format 11444777000161""",
)
@click.argument("value")
@click.pass_obj
def format_cmd(app: AppContext, value: str) -> None:
    """Format a 14-digit VALUE; any other length is echoed unchanged."""
    app.emit(app.service.format(value))
