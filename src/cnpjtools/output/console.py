"""Rich Console factory and theme for cnpjtools output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops color codes when it sees no terminal
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CNPJ_THEME = Theme(
    {
        "cnpj.ok": "bold green",
        "cnpj.error": "bold red",
        "cnpj.warning": "bold yellow",
        "cnpj.op": "bold cyan",
        "cnpj.key": "dim",
        "cnpj.value": "bold blue",
        "cnpj.status.valid": "green",
        "cnpj.status.invalid": "red",
        "cnpj.status.format": "yellow",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "valid": "cnpj.status.valid",
    "invalid": "cnpj.status.invalid",
    "equal_digits": "cnpj.status.invalid",
    "invalid_format": "cnpj.status.format",
    "null_or_empty": "cnpj.status.format",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=CNPJ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for a validation status."""
    return _STATUS_STYLES.get(status, "")
