"""Engine settings.

Every field reads ``CADENCE_<FIELD>`` from the environment. An env file is
consulted after real environment variables: ``CADENCE_ENV_FILE`` when set,
else ``config/.env.dev``, else ``config/.env``.
"""

from __future__ import annotations

import os
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Directory holding the optional env files."""
    return _project_root() / "config"


def _env_file() -> Path | None:
    explicit = os.environ.get("CADENCE_ENV_FILE")
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    for name in _ENV_FILE_CANDIDATES:
        candidate = get_config_dir() / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Tunables for detection, materialization, currency and logging."""

    model_config = SettingsConfigDict(
        env_prefix="CADENCE_",
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Pattern detection
    detection_window_days: int = Field(default=5, ge=1, le=366)
    detection_min_occurrences: int = Field(default=3, ge=2)
    detection_amount_bucket: Decimal = Field(default=Decimal("0.01"), gt=0)

    # Materialization
    materialize_lookahead_days: int = Field(default=0, ge=0)
    max_occurrences_per_run: int = Field(default=1000, ge=1)

    # Ledger
    default_currency: str = "EUR"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("default_currency", mode="before")
    @classmethod
    def _validate_currency(cls, v: Any) -> str:
        code = str(v).strip().upper()
        if len(code) != 3 or not code.isalpha():  # NOQA: PLR2004
            msg = f"default_currency must be a 3-letter ISO code, got '{v}'"
            raise ValueError(msg)
        return code

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> str:
        return str(v).strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Return cached engine settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
