"""
Console-only logger family (gate + prefix).

Each call checks the family's shared configuration, and when it passes,
writes ``[name] ...`` to stdout (trace/debug/info/replicants) or stderr
(warn/error).
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import IO, Any, ClassVar, Optional, Union

from .config import LoggerConfig, LoggerOptions
from .formatting import format_message
from .levels import LOG_LEVELS, rank


class ConsoleLogger:
    """A named logger bound to a family created by ``create_console_logger_factory``."""

    config: ClassVar[LoggerConfig]
    _stdout: ClassVar[Optional[IO[str]]] = None
    _stderr: ClassVar[Optional[IO[str]]] = None

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}>"

    # -------------------------------------------------------------------------
    # Gate
    # -------------------------------------------------------------------------

    def _should_log(self, level: str) -> bool:
        console = self.config.console
        if not console.enabled:
            return False
        # Unknown configured levels match nothing
        threshold = rank(console.level)
        return threshold is not None and threshold <= LOG_LEVELS[level]

    def _write(self, stream: Optional[IO[str]], args: tuple[Any, ...]) -> None:
        stream.write(format_message((f"[{self._name}]", *args)) + "\n")
        stream.flush()

    def _out(self) -> IO[str]:
        return self._stdout or sys.stdout

    def _err(self) -> IO[str]:
        return self._stderr or sys.stderr

    # -------------------------------------------------------------------------
    # Level methods
    # -------------------------------------------------------------------------

    def trace(self, *args: Any) -> None:
        if self._should_log("trace"):
            self._write(self._out(), args)

    def debug(self, *args: Any) -> None:
        if self._should_log("debug"):
            self._write(self._out(), args)

    def info(self, *args: Any) -> None:
        if self._should_log("info"):
            self._write(self._out(), args)

    def warn(self, *args: Any) -> None:
        if self._should_log("warn"):
            self._write(self._err(), args)

    def error(self, *args: Any) -> None:
        if self._should_log("error"):
            self._write(self._err(), args)

    def replicants(self, *args: Any) -> None:
        if not self.config.console.enabled or not self.config.replicants:
            return
        self._write(self._out(), args)

    @classmethod
    def global_reconfigure(cls, opts: Union[LoggerOptions, Mapping[str, Any], None] = None) -> None:
        """Partially merge ``opts`` into the family configuration."""
        cls.config.merge(opts)


def create_console_logger_factory(
    initial_opts: Union[LoggerOptions, Mapping[str, Any], None] = None,
    *,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> type[ConsoleLogger]:
    """
    Configure and return a console logger class.

    Args:
        initial_opts: Partial configuration (``console.enabled``, ``console.level``, ``replicants``)
        stdout: Stream for trace/debug/info/replicants (default: sys.stdout at write time)
        stderr: Stream for warn/error (default: sys.stderr at write time)

    Returns:
        A ``ConsoleLogger`` subclass whose instances share one configuration.
    """
    config = LoggerConfig()
    config.merge(initial_opts)
    return type(
        "ConsoleLogger",
        (ConsoleLogger,),
        {"__slots__": (), "config": config, "_stdout": stdout, "_stderr": stderr},
    )
