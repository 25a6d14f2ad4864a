"""Config file discovery.

Walk-up finder locates cnpjtools.toml the way git finds .git/.
Supports the CNPJTOOLS_CONFIG env var; --config bypasses discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "cnpjtools.toml"
CONFIG_ENV_VAR = "CNPJTOOLS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for cnpjtools.toml.

    CNPJTOOLS_CONFIG wins when set; a dangling env path yields None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
