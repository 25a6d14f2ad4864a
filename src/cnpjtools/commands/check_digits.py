"""Command: compute check digits for a 12-digit base."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cnpjtools.commands._base import CnpjCommand

if TYPE_CHECKING:
    from cnpjtools.commands._context import AppContext


@click.command(
    "check-digits",
    cls=CnpjCommand,
    examples="""\
  cnpjtools check-digits 114447770001
  cnpjtools check-digits 11.444.777/0001
  cnpjtools --json check-digits 114447770001""",
)
@click.argument("base")
@click.pass_obj
def check_digits(app: AppContext, base: str) -> None:
    """Compute both check digits for the 12-digit BASE."""
    app.emit(app.service.check_digits(base))
