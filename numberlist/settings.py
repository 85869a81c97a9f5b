"""
Runtime settings loaded from environment variables.
Every variable is read with the ``NUMBERLIST_`` prefix, optionally seeded from a `.env` file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

ENV_PREFIX: Final[str] = "NUMBERLIST_"


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    LOG_LEVEL: str = "INFO"
    SECTION_DELIM: str = "&-=-&"

    @field_validator("SECTION_DELIM")
    @classmethod
    def _delim_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("SECTION_DELIM must not be empty")
        return value


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate prefixed settings from `.env` and the process environment."""

    if load_env:
        load_dotenv()

    values = {
        key[len(ENV_PREFIX) :]: value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX)
    }
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
