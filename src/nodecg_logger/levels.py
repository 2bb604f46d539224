"""
Level enumeration and the two rank encodings.

The console logger compares ascending ranks (trace=0 ... error=4), the
backend compares severities where a lower number is more severe
(error=0 ... trace=4). Both encode the same ordering.
"""

from __future__ import annotations

import math
from enum import Enum


class Level(str, Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    INFINITE = "_infinite"


LEVEL_DESCRIPTIONS = {
    Level.TRACE: "The highest level of logging, logs everything.",
    Level.DEBUG: "Less spammy than trace, includes most info relevant for debugging.",
    Level.INFO: "The default logging level. Logs useful info, warnings, and errors.",
    Level.WARN: "Only logs warnings and errors.",
    Level.ERROR: "Only logs errors.",
}

# Ascending ranks used by the console logger gate
LOG_LEVELS: dict[str, float] = {
    "trace": 0,
    "debug": 1,
    "info": 2,
    "warn": 3,
    "error": 4,
    "_infinite": math.inf,
}

# Backend severities, lower number = higher severity
SEVERITIES: dict[str, int] = {
    "trace": 4,
    "debug": 3,
    "info": 2,
    "warn": 1,
    "error": 0,
}

DEFAULT_COLORS: dict[str, str] = {
    "trace": "green",
    "debug": "cyan",
    "info": "white",
    "warn": "yellow",
    "error": "red",
}

METHOD_LEVELS: tuple[str, ...] = ("trace", "debug", "info", "warn", "error")


def level_name(level: Level | str | None) -> str | None:
    """Normalize a Level member or plain string to its name."""
    if isinstance(level, Level):
        return level.value
    return level


def rank(level: Level | str | None) -> float | None:
    """Ascending rank of ``level``, or None when the name is unknown."""
    name = level_name(level)
    if not isinstance(name, str):
        return None
    return LOG_LEVELS.get(name)


def severity(level: Level | str | None) -> int | None:
    """Backend severity of ``level``, or None when the name is unknown."""
    name = level_name(level)
    if not isinstance(name, str):
        return None
    return SEVERITIES.get(name)


def describe_levels() -> str:
    """One ``name: description`` entry per level, for help and settings text."""
    return "; ".join(f"{level.value}: {text}" for level, text in LEVEL_DESCRIPTIONS.items())
