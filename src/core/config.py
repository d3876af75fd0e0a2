"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI or the executor.
- Settings only tune diagnostics; the platform opener and argument rules are
  fixed and cannot be overridden.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "browse"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class BrowseSettings(BaseSettings):
    """Central settings, read from `BROWSE_*` env vars and `.env` files."""

    model_config = SettingsConfigDict(
        env_prefix="BROWSE_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics written to stderr.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_settings() -> tuple[BrowseSettings, str | None]:
    """Load settings, falling back to defaults when the sources are unusable.

    Settings only tune diagnostics, so a bad env var or an unreadable `.env`
    must not turn a valid invocation into a failure. Returns the settings and,
    when the fallback was used, a description of the problem.
    """

    try:
        return BrowseSettings(), None
    except ValidationError as exc:
        return BrowseSettings.model_construct(), exc.errors()[0]["msg"]
    except (OSError, ValueError) as exc:
        return BrowseSettings.model_construct(), f"{exc.__class__.__name__}: {exc}"
