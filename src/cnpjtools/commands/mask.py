"""Command: apply the CNPJ mask to raw or partial input."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cnpjtools.commands._base import CnpjCommand

if TYPE_CHECKING:
    from cnpjtools.commands._context import AppContext


@click.command(
    cls=CnpjCommand,
    examples="""\
  cnpjtools mask 11444777000161
  cnpjtools mask 1234567
  cnpjtools -q mask '11 444 777 0001 61'""",
)
@click.argument("value")
@click.pass_obj
def mask(app: AppContext, value: str) -> None:
    """Mask VALUE as DD.DDD.DDD/DDDD-DD, keeping at most 14 digits."""
    app.emit(app.service.mask(value))
