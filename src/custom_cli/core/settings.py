"""
Centralized settings for custom-cli.

All fields can be set via ``CUSTOM_CLI_*`` environment variables (e.g.
``CUSTOM_CLI_LOG_LEVEL=DEBUG``) or through a ``.env`` file in the working
directory.  :func:`get_settings` validates once and caches the result for
the lifetime of the process.
"""

from __future__ import annotations

import codecs
from enum import Enum

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from custom_cli.core.errors import ConfigError


class NumberingStyle(str, Enum):
    """Origin of the display number when line numbering is enabled."""

    ONE_BASED = "one-based"
    ZERO_BASED = "zero-based"

    @property
    def origin(self) -> int:
        return 1 if self is NumberingStyle.ONE_BASED else 0


class CustomCliSettings(BaseSettings):
    """custom-cli configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CUSTOM_CLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console", description="console or json")

    # ── Input ────────────────────────────────────────────────────
    encoding: str = Field(default="utf-8")
    encoding_errors: str = Field(default="replace")

    # ── display-file behaviour ───────────────────────────────────
    numbering: NumberingStyle = Field(default=NumberingStyle.ONE_BASED)
    report_open_errors: bool = Field(
        default=True,
        description="Report unreadable files on stderr with a non-zero exit code",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(f"Invalid log level: {value!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in {"console", "json"}:
            raise ValueError(f"Invalid log format: {value!r}")
        return fmt

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value!r}") from e
        return value

    @field_validator("encoding_errors")
    @classmethod
    def _check_error_handler(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding error handler: {value!r}") from e
        return value


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, CustomCliSettings] = {}


def get_settings(*, _force_reload: bool = False) -> CustomCliSettings:
    """Load, validate, and cache a :class:`CustomCliSettings` instance.

    Raises:
        ConfigError: if any CUSTOM_CLI_* value fails validation.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = CustomCliSettings()
    except ValidationError as e:
        raise ConfigError(str(e), cause=e) from e
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings (tests, reconfiguration)."""
    _settings_cache.clear()
