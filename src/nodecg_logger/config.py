"""
Logger Configuration.

Two layers:
- *Options* (``LoggerOptions``): a partial payload, every field optional.
  ``None`` means "leave as is", including an explicit ``None`` such as
  ``{"console": {"enabled": None}}``; pass ``False`` to silence a sink.
  Level names are kept verbatim, so unknown names drop output at gate time.
- *Config* (``LoggerConfig``): the resolved, mutable state shared by every
  logger of a family. ``merge`` applies options onto it.

Environment-driven defaults are available through ``LoggerSettings``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import Level, describe_levels

DEFAULT_LEVEL = Level.INFO.value
DEFAULT_FILE_PATH = "logs/nodecg.log"


# Malformed values are treated as absent rather than rejected


def _coerce_level(value: Any) -> Optional[str]:
    if isinstance(value, Level):
        return value.value
    if isinstance(value, str):
        return value
    return None


def _coerce_enabled(value: Any) -> Optional[bool]:
    if value is None:
        return None
    return bool(value)


def _coerce_path(value: Any) -> Optional[str]:
    if isinstance(value, (str, os.PathLike)):
        path = os.fspath(value)
        return path if isinstance(path, str) and path else None
    return None


# =============================================================================
# Partial Options
# =============================================================================


class ConsoleOptions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    enabled: Optional[bool] = None
    level: Optional[str] = None

    @field_validator("enabled", mode="before")
    @classmethod
    def _validate_enabled(cls, value: Any) -> Optional[bool]:
        return _coerce_enabled(value)

    @field_validator("level", mode="before")
    @classmethod
    def _validate_level(cls, value: Any) -> Optional[str]:
        return _coerce_level(value)


class FileOptions(ConsoleOptions):
    path: Optional[str] = None

    @field_validator("path", mode="before")
    @classmethod
    def _validate_path(cls, value: Any) -> Optional[str]:
        return _coerce_path(value)


class LoggerOptions(BaseModel):
    """A partial configuration payload (initial or reconfigure)."""

    model_config = ConfigDict(extra="ignore")

    console: Optional[ConsoleOptions] = None
    file: Optional[FileOptions] = None
    replicants: Optional[bool] = None

    @field_validator("replicants", mode="before")
    @classmethod
    def _validate_replicants(cls, value: Any) -> Optional[bool]:
        return _coerce_enabled(value)

    @field_validator("console", "file", mode="before")
    @classmethod
    def _drop_malformed_sections(cls, value: Any) -> Any:
        if value is None or isinstance(value, (BaseModel, Mapping)):
            return value
        return None

    @classmethod
    def coerce(cls, opts: Union["LoggerOptions", Mapping[str, Any], None]) -> "LoggerOptions":
        """Accept a model, a plain mapping or None."""
        if isinstance(opts, cls):
            return opts
        if isinstance(opts, Mapping):
            return cls.model_validate(dict(opts))
        return cls()


# =============================================================================
# Resolved State
# =============================================================================


class ConsoleConfig(BaseModel):
    enabled: bool = False
    level: str = DEFAULT_LEVEL


class FileConfig(ConsoleConfig):
    path: str = DEFAULT_FILE_PATH


class LoggerConfig(BaseModel):
    """Shared mutable configuration of one logger family."""

    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    file: FileConfig = Field(default_factory=FileConfig)
    replicants: bool = False

    def merge(self, opts: Union[LoggerOptions, Mapping[str, Any], None]) -> LoggerOptions:
        """Overwrite only the fields present in ``opts``. Returns the coerced options."""
        options = LoggerOptions.coerce(opts)

        if options.console is not None:
            if options.console.enabled is not None:
                self.console.enabled = options.console.enabled
            if options.console.level is not None:
                self.console.level = options.console.level

        if options.file is not None:
            if options.file.enabled is not None:
                self.file.enabled = options.file.enabled
            if options.file.level is not None:
                self.file.level = options.file.level
            if options.file.path is not None:
                self.file.path = options.file.path

        if options.replicants is not None:
            self.replicants = options.replicants

        return options


# =============================================================================
# Environment Settings
# =============================================================================


class LoggerSettings(BaseSettings):
    """Initial logger configuration read from ``NODECG_LOG_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="NODECG_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    console_enabled: Optional[bool] = Field(default=None, description="Enable console output")
    console_level: Optional[str] = Field(default=None, description=f"Console threshold level ({describe_levels()})")
    file_enabled: Optional[bool] = Field(default=None, description="Enable file output")
    file_level: Optional[str] = Field(default=None, description=f"File threshold level ({describe_levels()})")
    file_path: Optional[str] = Field(default=None, description="Path of the log file")
    replicants: Optional[bool] = Field(default=None, description="Enable replicant logging")

    @field_validator("console_level", "file_level", mode="before")
    @classmethod
    def _validate_level(cls, value: Any) -> Optional[str]:
        return _coerce_level(value)

    def to_options(self) -> LoggerOptions:
        return LoggerOptions(
            console=ConsoleOptions(enabled=self.console_enabled, level=self.console_level),
            file=FileOptions(enabled=self.file_enabled, level=self.file_level, path=self.file_path),
            replicants=self.replicants,
        )
