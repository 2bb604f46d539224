"""
Name-prefixing logger families with runtime reconfiguration.

Two variants:
- console: gate + ``[name]`` prefix, writes to stdout/stderr
- server: structlog backend with console and file transports, plus an
  optional error-reporting integration for ``error`` calls

Both return a logger class from a factory; every instance of that class
shares one configuration, changed through ``global_reconfigure``.
"""

from .config import LoggerConfig, LoggerOptions, LoggerSettings
from .console_logger import ConsoleLogger, create_console_logger_factory
from .exceptions import LoggerError, UnsupportedReporterError
from .levels import Level
from .reporting import ErrorReporter, LoggedError, RavenReporter, SentryReporter
from .server_logger import ServerLogger, create_logger_factory, create_logger_factory_from_settings

__all__ = [
    "ConsoleLogger",
    "ErrorReporter",
    "Level",
    "LoggedError",
    "LoggerConfig",
    "LoggerError",
    "LoggerOptions",
    "LoggerSettings",
    "RavenReporter",
    "SentryReporter",
    "ServerLogger",
    "UnsupportedReporterError",
    "create_console_logger_factory",
    "create_logger_factory",
    "create_logger_factory_from_settings",
]
