"""CnpjService — validate, mask, format, and generate behind ServiceResult.

The engine in :mod:`cnpjtools.domain.cnpj` returns bare values. This
service attaches the human-readable message for each outcome, applies
settings defaults, and turns failures into structured errors.
"""

from __future__ import annotations

import random

from cnpjtools.domain.cnpj import (
    BASE_LENGTH,
    CNPJ_LENGTH,
    compute_check_digits,
    format_cnpj,
    generate,
    mask,
    sanitize,
    validate,
)
from cnpjtools.domain.types import CnpjStatus
from cnpjtools.services.base import BaseService
from cnpjtools.services.result import ServiceResult

STATUS_MESSAGES: dict[CnpjStatus, str] = {
    CnpjStatus.NULL_OR_EMPTY: "CNPJ cannot be null or empty.",
    CnpjStatus.INVALID_FORMAT: "CNPJ must have 14 digits (numbers only).",
    CnpjStatus.EQUAL_DIGITS: "CNPJ with all digits equal is not valid.",
    CnpjStatus.INVALID: "Invalid CNPJ number.",
    CnpjStatus.VALID: "Valid CNPJ.",
}

FICTITIOUS_WARNING = "Generated CNPJs are fictitious and must not be used as real identifiers."


class CnpjService(BaseService):
    """Identifier operations for the CLI and any other front end."""

    def _display(self, digits: str) -> str:
        return mask(digits) if self._settings.output.masked else digits

    def validate(self, values: list[str]) -> ServiceResult:
        """Validate every value; ok only when all of them are valid CNPJs."""
        op = "validate"
        if not values:
            return self._fail(op, "NO_INPUT", "No CNPJ values given.")

        items = []
        for value in values:
            status = validate(value)
            digits = sanitize(value)
            items.append(
                {
                    "input": value,
                    "digits": digits,
                    "cnpj": self._display(digits) if len(digits) == CNPJ_LENGTH else None,
                    "status": status.value,
                    "valid": status is CnpjStatus.VALID,
                    "message": STATUS_MESSAGES[status],
                }
            )

        valid_count = sum(1 for item in items if item["valid"])
        data = {"count": len(items), "valid_count": valid_count, "items": items}
        self._log.debug("cnpj.validated", count=len(items), valid=valid_count)

        if valid_count == len(items):
            return ServiceResult(ok=True, op=op, data=data)
        if len(items) == 1:
            status = CnpjStatus(items[0]["status"])
            return self._fail(op, status.name, STATUS_MESSAGES[status], data=data)
        invalid = len(items) - valid_count
        return self._fail(
            op,
            "INVALID_CNPJ",
            f"{invalid} of {len(items)} values are not valid CNPJs.",
            data=data,
            invalid=[item["input"] for item in items if not item["valid"]],
        )

    def mask(self, value: str) -> ServiceResult:
        """Mask raw or partial input, truncating past 14 digits."""
        digits = sanitize(value)
        warnings: list[str] = []
        if len(digits) > CNPJ_LENGTH:
            warnings.append(f"Input truncated to {CNPJ_LENGTH} digits.")
        return ServiceResult(
            ok=True,
            op="mask",
            data={
                "input": value,
                "masked": mask(value),
                "complete": len(digits) >= CNPJ_LENGTH,
            },
            warnings=warnings,
        )

    def format(self, value: str) -> ServiceResult:
        """Mask a complete 14-character value; other lengths pass through."""
        formatted = format_cnpj(value)
        return ServiceResult(
            ok=True,
            op="format",
            data={"input": value, "formatted": formatted, "changed": formatted != value},
        )

    def check_digits(self, base: str) -> ServiceResult:
        """Compute the two check digits for a 12-digit base."""
        op = "check_digits"
        digits = sanitize(base)
        if len(digits) != BASE_LENGTH:
            return self._fail(
                op,
                "INVALID_BASE",
                f"CNPJ base must have {BASE_LENGTH} digits, got {len(digits)}.",
                base=base,
            )
        first, second = compute_check_digits(digits)
        full = f"{digits}{first}{second}"
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "base": digits,
                "check_digits": f"{first}{second}",
                "cnpj": full,
                "formatted": format_cnpj(full),
            },
        )

    def generate(
        self,
        *,
        count: int | None = None,
        masked: bool | None = None,
        branch: str | None = None,
        random_branch: bool | None = None,
        seed: int | None = None,
    ) -> ServiceResult:
        """Generate fictitious CNPJs; unset arguments fall back to settings."""
        op = "generate"
        defaults = self._settings.generate
        count = defaults.count if count is None else count
        masked = defaults.masked if masked is None else masked
        seed = defaults.seed if seed is None else seed
        if branch is not None:
            suffix: str | None = branch
        elif random_branch or (random_branch is None and defaults.random_branch):
            suffix = None
        else:
            suffix = defaults.branch

        if count < 1:
            return self._fail(op, "INVALID_COUNT", f"Count must be at least 1, got {count}.")

        rng = random.Random(seed)
        try:
            raw = [generate(rng, branch=suffix) for _ in range(count)]
        except ValueError as exc:
            return self._fail(op, "INVALID_BRANCH", str(exc), branch=suffix)

        items = [format_cnpj(value) for value in raw] if masked else raw
        self._log.debug("cnpj.generated", count=count, branch=suffix, seeded=seed is not None)
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": count, "masked": masked, "fictitious": True, "items": items},
            warnings=[FICTITIOUS_WARNING],
            meta={"seed": seed} if seed is not None else None,
        )
