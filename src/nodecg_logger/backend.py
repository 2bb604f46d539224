"""
Multi-transport backend.

A structlog bound logger renders each call (level, timestamp, message) and
its wrapped logger hands the event to every transport that accepts it. A
single call may therefore produce zero, one or several writes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatting import format_message
from .transports import BaseTransport, ConsoleTransport

# =============================================================================
# Structlog Processors
# =============================================================================


def add_log_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the level name, keeping ``warn`` as is."""
    event_dict["level"] = method_name
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def render_message(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Join the positional arguments into the display message."""
    event_dict["message"] = format_message(event_dict.pop("positional_args", ()))
    return event_dict


# =============================================================================
# Wrapped Logger & Bound Logger
# =============================================================================


class TransportRouter:
    """Wrapped logger that emits each event to the accepting transports."""

    def __init__(self, transports: Mapping[str, BaseTransport]):
        self._transports = transports

    def dispatch(self, **event_dict: Any) -> None:
        level = event_dict.get("level", "info")
        for transport in self._transports.values():
            if transport.accepts(level):
                transport.emit(event_dict)

    trace = debug = info = warn = error = dispatch


class BackendLogger(structlog.BoundLoggerBase):
    """Bound logger exposing the five variadic level methods."""

    def trace(self, *args: Any) -> Any:
        return self._proxy_to_logger("trace", positional_args=args)

    def debug(self, *args: Any) -> Any:
        return self._proxy_to_logger("debug", positional_args=args)

    def info(self, *args: Any) -> Any:
        return self._proxy_to_logger("info", positional_args=args)

    def warn(self, *args: Any) -> Any:
        return self._proxy_to_logger("warn", positional_args=args)

    def error(self, *args: Any) -> Any:
        return self._proxy_to_logger("error", positional_args=args)


class Backend:
    """Leveled logger over a set of named transports."""

    def __init__(self, transports: Iterable[BaseTransport]):
        self.transports: dict[str, BaseTransport] = {t.name: t for t in transports}
        self._logger = BackendLogger(
            TransportRouter(self.transports),
            processors=[add_log_level, add_timestamp, render_message],
            context={},
        )

    def add_colors(self, colors: Mapping[str, str]) -> None:
        """Register level -> color associations on this backend's console transports."""
        for transport in self.transports.values():
            if isinstance(transport, ConsoleTransport):
                transport.add_colors(colors)

    def trace(self, *args: Any) -> None:
        self._logger.trace(*args)

    def debug(self, *args: Any) -> None:
        self._logger.debug(*args)

    def info(self, *args: Any) -> None:
        self._logger.info(*args)

    def warn(self, *args: Any) -> None:
        self._logger.warn(*args)

    def error(self, *args: Any) -> None:
        self._logger.error(*args)

    def close(self) -> None:
        for transport in self.transports.values():
            transport.close()
