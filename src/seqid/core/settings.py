"""Environment-driven settings for building a seqid generator.

The generator, sequencers and validators never read configuration
themselves; they take everything as constructor arguments. ``IdSettings`` is
the optional outer layer that services and the ``seqid`` CLI use to pick
those arguments from ``SEQID_*`` environment variables or a ``.env`` file.

Examples:
    >>> import os
    >>> os.environ["SEQID_SEQUENCE_MAX"] = "999"
    >>> IdSettings().sequence_max
    999

Tags:
    settings, configuration, pydantic, environment, seqid-core
"""

from __future__ import annotations

import logging
from datetime import datetime

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from seqid.core.validators import ValidatorKind

LOG_FORMATS = ("auto", "json", "console")


class IdSettings(BaseSettings):
    """Settings for one identifier generator.

    Fields
    ──────
    sequence_min     : Lowest value of the in-process range sequencer
    sequence_max     : Highest value before the sequencer wraps
    sequence_initial : First value handed out (ignored if out of range)
    validator        : ``luhn`` or ``none``
    origin           : Epoch for the time component (None = Unix epoch)
    log_level        : Structlog log level
    log_format       : ``auto`` (JSON unless a tty), ``json`` or ``console``
    """

    model_config = SettingsConfigDict(
        env_prefix="SEQID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Sequence ─────────────────────────────────────────────────
    sequence_min: int = Field(default=0)
    sequence_max: int = Field(default=9999)
    sequence_initial: int | None = Field(default=None)

    # ── Signing ──────────────────────────────────────────────────
    validator: ValidatorKind = Field(default=ValidatorKind.LUHN)

    # ── Time ─────────────────────────────────────────────────────
    origin: datetime | None = Field(
        default=None,
        description="Reference time the id's seconds are counted from",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="auto")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt

    @property
    def json_logs(self) -> bool | None:
        """``configure_logging`` json_format argument for ``log_format``."""
        if self.log_format == "auto":
            return None
        return self.log_format == "json"


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, IdSettings] = {}


def get_settings(*, _force_reload: bool = False) -> IdSettings:
    """Load, validate, and cache an :class:`IdSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = IdSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings (tests, reloads after env changes)."""
    _settings_cache.clear()


__all__ = ["IdSettings", "LOG_FORMATS", "get_settings", "clear_settings_cache"]
