"""Command: validate one or more CNPJs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cnpjtools.commands._base import CnpjCommand

if TYPE_CHECKING:
    from cnpjtools.commands._context import AppContext


def _expand_stdin(values: tuple[str, ...]) -> list[str]:
    """Replace each ``-`` argument with the non-blank lines of stdin."""
    expanded: list[str] = []
    for value in values:
        if value == "-":
            stream = click.get_text_stream("stdin")
            expanded.extend(line.strip() for line in stream if line.strip())
        else:
            expanded.append(value)
    return expanded


@click.command(
    cls=CnpjCommand,
    examples="""\
  cnpjtools validate 11.444.777/0001-61
  cnpjtools validate 11444777000161 11222333000181
  cat cnpjs.txt | cnpjtools validate -
  cnpjtools --json validate 11444777000161""",
)
@click.argument("values", nargs=-1)
@click.pass_obj
def validate(app: AppContext, values: tuple[str, ...]) -> None:
    """Validate CNPJs (masked or raw); exits 1 if any is invalid."""
    app.emit(app.service.validate(_expand_stdin(values)))
