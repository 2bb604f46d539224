"""
Value formatting and console line rendering.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

import orjson
from pydantic import BaseModel
from structlog.typing import EventDict

from .levels import DEFAULT_COLORS

# =============================================================================
# Value Formatting
# =============================================================================


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, BaseException):
        return _format_exception(value)
    return str(value)


def orjson_dumps(value: Any) -> str:
    """Compact JSON rendering using orjson."""
    return orjson.dumps(value, default=_json_default, option=orjson.OPT_NON_STR_KEYS).decode()


def _format_exception(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


def _is_structured(value: Any) -> bool:
    if isinstance(value, (Mapping, list, tuple, set, frozenset, BaseModel)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def format_value(value: Any) -> str:
    """Render any loggable value as a display string. Never raises."""
    try:
        if isinstance(value, str):
            return value
        if isinstance(value, BaseException):
            return _format_exception(value)
        if _is_structured(value):
            return orjson_dumps(value)
        return str(value)
    except Exception:
        pass

    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)


def format_message(args: Iterable[Any]) -> str:
    """Join the display strings of ``args`` with single spaces."""
    return " ".join(format_value(arg) for arg in args)


# =============================================================================
# Console Formatter
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "gray": "\033[90m",
    "grey": "\033[90m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    code = COLORS.get(color)
    if not code:
        return text
    return f"{code}{text}{COLORS['reset']}"


class ConsoleFormatter:
    """Renders backend events as ``level: message`` lines."""

    @classmethod
    def format(
        cls,
        event_dict: EventDict,
        *,
        use_color: bool = True,
        with_timestamp: bool = False,
        colors: Mapping[str, str] | None = None,
    ) -> str:
        """Format an event dict into a single line.

        ``colors`` maps level names to color names (default: ``DEFAULT_COLORS``).
        """
        level = str(event_dict.get("level", "info"))
        message = event_dict.get("message", event_dict.get("event", ""))

        label = level
        if use_color:
            color = (DEFAULT_COLORS if colors is None else colors).get(level)
            if color:
                label = colorize(level, color)

        line = f"{label}: {message}"
        if with_timestamp and event_dict.get("timestamp"):
            line = f"{event_dict['timestamp']} - {line}"
        return line
