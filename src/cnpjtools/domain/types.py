"""Validation outcomes and identifier value types.

A validation call yields exactly one :class:`CnpjStatus`. The engine
never attaches human-readable text; presentation layers map each status
to their own message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class CnpjStatus(StrEnum):
    """Mutually exclusive outcomes of :func:`cnpjtools.domain.cnpj.validate`."""

    NULL_OR_EMPTY = "null_or_empty"
    INVALID_FORMAT = "invalid_format"
    EQUAL_DIGITS = "equal_digits"
    INVALID = "invalid"
    VALID = "valid"


class RandomSource(Protocol):
    """Anything that can draw uniform integers; ``random.Random`` qualifies."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class CnpjParts:
    """A raw identifier split into company root, branch, and check digits."""

    root: str
    branch: str
    check: str

    @property
    def is_head_office(self) -> bool:
        return self.branch == "0001"
