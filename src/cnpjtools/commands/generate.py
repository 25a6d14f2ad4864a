"""Command: generate fictitious valid CNPJs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cnpjtools.commands._base import CnpjCommand

if TYPE_CHECKING:
    from cnpjtools.commands._context import AppContext


@click.command(
    cls=CnpjCommand,
    examples="""\
  cnpjtools generate
  cnpjtools generate --count 5 --masked
  cnpjtools generate --branch 0002
  cnpjtools generate --random-branch
  cnpjtools -q generate --count 3 --seed 42""",
)
@click.option("-n", "--count", type=click.IntRange(min=1), default=None, help="How many to generate.")
@click.option("--masked", is_flag=True, help="Output DD.DDD.DDD/DDDD-DD.")
@click.option("--raw", is_flag=True, help="Output digits only (overrides config).")
@click.option("--branch", default=None, help="Fixed 4-digit branch suffix (default 0001).")
@click.option("--random-branch", is_flag=True, help="Draw the branch digits too.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.pass_obj
def generate(
    app: AppContext,
    count: int | None,
    masked: bool,
    raw: bool,
    branch: str | None,
    random_branch: bool,
    seed: int | None,
) -> None:
    """Generate fictitious CNPJs that pass validation."""
    if masked and raw:
        raise click.UsageError("--masked and --raw are mutually exclusive.")
    if branch is not None and random_branch:
        raise click.UsageError("--branch and --random-branch are mutually exclusive.")
    app.emit(
        app.service.generate(
            count=count,
            masked=True if masked else (False if raw else None),
            branch=branch,
            random_branch=random_branch or None,
            seed=seed,
        )
    )
