"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``cnpjtools.toml`` only
carries overrides. An empty file (or none at all) is a valid setup.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# --- cnpjtools.toml sections ---


class GenerateConfig(BaseModel):
    """[generate] section."""

    model_config = {"frozen": True}

    branch: str = "0001"
    random_branch: bool = False
    count: int = Field(default=1, ge=1)
    masked: bool = False
    seed: int | None = None

    @field_validator("branch")
    @classmethod
    def _four_digits(cls, value: str) -> str:
        if len(value) != 4 or not value.isdigit():
            msg = "branch must be exactly 4 digits"
            raise ValueError(msg)
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    masked: bool = True

