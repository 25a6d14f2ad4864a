"""CNPJ identifier engine: sanitize, validate, mask, and generate.

All functions are pure. The only state consumed is the random source
handed to :func:`generate`.

INVARIANT: a raw identifier is valid only when it has exactly 14 digits,
the digits are not all identical, and both mod-11 check digits match.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Sequence

from cnpjtools.domain.types import CnpjParts, CnpjStatus, RandomSource

logger = logging.getLogger(__name__)

CNPJ_LENGTH = 14
BASE_LENGTH = 12
ROOT_LENGTH = 8
HEAD_OFFICE_BRANCH = "0001"

FIRST_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
SECOND_WEIGHTS: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

# Separator inserted *before* the digit at each index.
MASK_SEPARATORS: dict[int, str] = {2: ".", 5: ".", 8: "/", 12: "-"}

_NON_DIGITS = re.compile(r"[^0-9]")
_DIGITS_ONLY = re.compile(r"^[0-9]+$")
_BRANCH_PATTERN = re.compile(r"^[0-9]{4}$")


def sanitize(text: str) -> str:
    """Strip every character that is not an ASCII decimal digit."""
    return _NON_DIGITS.sub("", text)


def check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Mod-11 check digit of *digits* under positional *weights*.

    The weighted sum is reduced modulo 11; a remainder of 0 or 1 yields 0,
    anything else yields ``11 - remainder``.
    """
    if len(digits) != len(weights):
        msg = f"Expected {len(weights)} digits, got {len(digits)}"
        raise ValueError(msg)
    remainder = sum(d * w for d, w in zip(digits, weights, strict=True)) % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_check_digits(base: str | Sequence[int]) -> tuple[int, int]:
    """Return both check digits for a 12-digit base.

    The second pass runs over the base followed by the first check digit.
    """
    digits = [int(c) for c in base] if isinstance(base, str) else list(base)
    if len(digits) != BASE_LENGTH or any(not 0 <= d <= 9 for d in digits):
        msg = f"CNPJ base must have {BASE_LENGTH} digits"
        raise ValueError(msg)
    first = check_digit(digits, FIRST_WEIGHTS)
    second = check_digit([*digits, first], SECOND_WEIGHTS)
    return first, second


def validate(text: str) -> CnpjStatus:
    """Classify *text* as exactly one :class:`CnpjStatus`.

    Checks run in a fixed order (empty, format, repeated digits, checksum)
    so the outcome is deterministic for inputs that fail several checks.
    """
    digits = sanitize(text)
    if not digits:
        return CnpjStatus.NULL_OR_EMPTY
    if len(digits) != CNPJ_LENGTH or not _DIGITS_ONLY.match(digits):
        return CnpjStatus.INVALID_FORMAT
    if len(set(digits)) == 1:
        return CnpjStatus.EQUAL_DIGITS

    provided = (int(digits[12]), int(digits[13]))
    if compute_check_digits(digits[:BASE_LENGTH]) == provided:
        return CnpjStatus.VALID
    return CnpjStatus.INVALID


def is_valid(text: str) -> bool:
    """Shorthand for ``validate(text) is CnpjStatus.VALID``."""
    return validate(text) is CnpjStatus.VALID


def mask(text: str) -> str:
    """Apply the ``DD.DDD.DDD/DDDD-DD`` mask to raw or partial input.

    Digits past the 14th are dropped, so this is safe to call on every
    keystroke of a live text field.
    """
    digits = sanitize(text)[:CNPJ_LENGTH]
    parts: list[str] = []
    for index, char in enumerate(digits):
        parts.append(MASK_SEPARATORS.get(index, ""))
        parts.append(char)
    return "".join(parts)


def format_cnpj(text: str) -> str:
    """Mask a complete 14-character value; anything else passes through.

    Separators go between the raw characters by position; the input is
    not sanitized.
    """
    if len(text) != CNPJ_LENGTH:
        return text
    return f"{text[:2]}.{text[2:5]}.{text[5:8]}/{text[8:12]}-{text[12:]}"


def split(text: str) -> CnpjParts:
    """Split a 14-digit identifier into root, branch, and check digits."""
    digits = sanitize(text)
    if len(digits) != CNPJ_LENGTH:
        msg = f"CNPJ must have {CNPJ_LENGTH} digits after sanitizing, got {len(digits)}"
        raise ValueError(msg)
    return CnpjParts(
        root=digits[:ROOT_LENGTH],
        branch=digits[ROOT_LENGTH:BASE_LENGTH],
        check=digits[BASE_LENGTH:],
    )


def generate(
    rng: RandomSource | None = None,
    *,
    branch: str | None = HEAD_OFFICE_BRANCH,
) -> str:
    """Generate a fictitious raw identifier that passes :func:`validate`.

    Args:
        rng: Random source. A fresh ``random.Random`` is used when omitted.
        branch: Fixed 4-digit branch suffix (head office by default).
            ``None`` draws the whole 12-digit base at random.

    The result is re-validated and regenerated on the rare draw that
    lands on a repeated-digit sequence.
    """
    if branch is not None and not _BRANCH_PATTERN.match(branch):
        msg = f"Branch must be 4 digits, got {branch!r}"
        raise ValueError(msg)
    source: RandomSource = rng if rng is not None else random.Random()
    random_length = ROOT_LENGTH if branch is not None else BASE_LENGTH

    attempts = 0
    while True:
        attempts += 1
        base = [source.randint(0, 9) for _ in range(random_length)]
        if branch is not None:
            base.extend(int(c) for c in branch)
        first, second = compute_check_digits(base)
        candidate = "".join(str(d) for d in (*base, first, second))
        if validate(candidate) is CnpjStatus.VALID:
            if attempts > 1:
                logger.debug("Generated CNPJ after %d attempts", attempts)
            return candidate
        logger.debug("Discarded generated CNPJ %s", candidate)


def generate_masked(
    rng: RandomSource | None = None,
    *,
    branch: str | None = HEAD_OFFICE_BRANCH,
) -> str:
    """Generate a fictitious identifier already in masked form."""
    return format_cnpj(generate(rng, branch=branch))
