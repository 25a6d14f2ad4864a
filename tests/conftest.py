"""Shared pytest fixtures and test helpers for cnpjtools tests."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import cycle
from pathlib import Path

import pytest
from click.testing import CliRunner

from cnpjtools.config.settings import CnpjSettings
from cnpjtools.services.cnpj import CnpjService

# Real-world-shaped valid identifiers used across the suite.
VALID_CNPJ = "11444777000161"
VALID_CNPJ_MASKED = "11.444.777/0001-61"
OTHER_VALID_CNPJ = "11222333000181"


class SequenceRandom:
    """Random source that replays a fixed digit sequence, cycling forever."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = cycle(list(values))
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        value = next(self._values)
        assert a <= value <= b
        return value


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env var set.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so stray
    ``cnpjtools.toml`` files never leak into a test.
    """
    monkeypatch.delenv("CNPJTOOLS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CnpjSettings:
    """Default settings resolved from an empty temp directory."""
    monkeypatch.delenv("CNPJTOOLS_CONFIG", raising=False)
    return CnpjSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: CnpjSettings) -> CnpjService:
    return CnpjService(settings)
