"""
Transport abstractions and concrete implementations.

Each transport owns its enabled flag (``silent``) and threshold level; the
backend asks every transport whether it accepts an event before emitting it.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import IO, Any

from structlog.typing import EventDict

from .formatting import ConsoleFormatter
from .levels import DEFAULT_COLORS, severity

# =============================================================================
# Transport Abstraction (Strategy Pattern)
# =============================================================================


class BaseTransport(ABC):
    """Abstract base class for output transports."""

    def __init__(self, name: str, *, level: str = "info", silent: bool = False):
        self.name = name
        self.level = level
        self.silent = silent

    def accepts(self, level: str) -> bool:
        """True iff unsilenced and ``level`` is at least as severe as the threshold."""
        if self.silent:
            return False
        threshold = severity(self.level)
        incoming = severity(level)
        if threshold is None or incoming is None:
            return False
        return incoming <= threshold

    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        """Write an event."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release resources held by the transport."""
        ...


class ConsoleTransport(BaseTransport):
    """Console transport writing ``level: message`` lines.

    Args:
        stream: Output stream (default: sys.stdout at write time)
        error_stream: Stream for ``stderr_levels`` (default: sys.stderr at write time)
        stderr_levels: Levels routed to the error stream
        colorize: Force color on/off; None detects a tty
        colors: Level -> color name associations (default: DEFAULT_COLORS)
    """

    def __init__(
        self,
        name: str = "console",
        *,
        level: str = "info",
        silent: bool = False,
        stream: IO[str] | None = None,
        error_stream: IO[str] | None = None,
        stderr_levels: Iterable[str] = ("warn", "error"),
        colorize: bool | None = None,
        colors: Mapping[str, str] | None = None,
    ):
        super().__init__(name, level=level, silent=silent)
        self._stream = stream
        self._error_stream = error_stream
        self.stderr_levels = frozenset(stderr_levels)
        self.colorize = colorize
        self.colors: dict[str, str] = dict(DEFAULT_COLORS if colors is None else colors)

    def add_colors(self, colors: Mapping[str, str]) -> None:
        """Register level -> color name associations for this transport."""
        self.colors.update(colors)

    def _stream_for(self, level: str) -> Any:
        if level in self.stderr_levels:
            return self._error_stream or sys.stderr
        return self._stream or sys.stdout

    def emit(self, event_dict: EventDict) -> None:
        stream = self._stream_for(str(event_dict.get("level")))
        use_color = self.colorize
        if use_color is None:
            use_color = bool(getattr(stream, "isatty", lambda: False)())

        stream.write(ConsoleFormatter.format(event_dict, use_color=use_color, colors=self.colors) + "\n")
        stream.flush()

    def close(self) -> None:
        pass


class FileTransport(BaseTransport):
    """Plain-text file transport (``timestamp - level: message``).

    The file is opened on first write and reopened when ``filename`` changes.
    The parent directory must exist; I/O errors propagate to the caller.
    """

    def __init__(self, name: str = "file", *, filename: str, level: str = "info", silent: bool = False):
        super().__init__(name, level=level, silent=silent)
        self._filename = filename
        self._file: IO[str] | None = None

    @property
    def filename(self) -> str:
        return self._filename

    @filename.setter
    def filename(self, value: str) -> None:
        if value != self._filename:
            self.close()
        self._filename = value

    def emit(self, event_dict: EventDict) -> None:
        if self._file is None:
            self._file = open(self._filename, "a", encoding="utf-8")
        self._file.write(ConsoleFormatter.format(event_dict, use_color=False, with_timestamp=True) + "\n")
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
