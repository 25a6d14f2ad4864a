"""cnpjtools — validate, mask, and generate Brazilian CNPJ identifiers."""

from cnpjtools.domain.cnpj import (
    check_digit,
    compute_check_digits,
    format_cnpj,
    generate,
    generate_masked,
    is_valid,
    mask,
    sanitize,
    split,
    validate,
)
from cnpjtools.domain.types import CnpjParts, CnpjStatus

__version__ = "0.1.0"

__all__ = [
    "CnpjParts",
    "CnpjStatus",
    "__version__",
    "check_digit",
    "compute_check_digits",
    "format_cnpj",
    "generate",
    "generate_masked",
    "is_valid",
    "mask",
    "sanitize",
    "split",
    "validate",
]
