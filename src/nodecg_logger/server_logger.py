"""
Server logger family (backend adapter).

Configures a ``Backend`` with a console transport and a file transport and
forwards every ``[name]``-tagged call to it; the transports decide whether
to write. ``error`` calls are also handed to an optional error reporter.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any, ClassVar, Optional, Union

from .backend import Backend
from .config import LoggerConfig, LoggerOptions, LoggerSettings
from .formatting import format_message
from .levels import DEFAULT_COLORS
from .reporting import SERVER_REPORTER_LABEL, ErrorReporter, LoggedError, as_reporter
from .transports import ConsoleTransport, FileTransport

CONSOLE_TRANSPORT = "nodecgConsole"
FILE_TRANSPORT = "nodecgFile"

_log = logging.getLogger(__name__)


def make_log_folder_if_missing(file_path: str) -> None:
    """Create the parent directory of ``file_path`` (recursively). Errors propagate."""
    folder = Path(file_path).parent
    if not folder.exists():
        _log.debug("Creating log folder %s", folder)
        folder.mkdir(parents=True, exist_ok=True)


class ServerLogger:
    """A named logger bound to a family created by ``create_logger_factory``."""

    config: ClassVar[LoggerConfig]
    backend: ClassVar[Backend]
    reporter: ClassVar[Optional[ErrorReporter]] = None

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r}>"

    @property
    def _tag(self) -> str:
        return f"[{self._name}]"

    def trace(self, *args: Any) -> None:
        self.backend.trace(self._tag, *args)

    def debug(self, *args: Any) -> None:
        self.backend.debug(self._tag, *args)

    def info(self, *args: Any) -> None:
        self.backend.info(self._tag, *args)

    def warn(self, *args: Any) -> None:
        self.backend.warn(self._tag, *args)

    def error(self, *args: Any) -> None:
        try:
            self.backend.error(self._tag, *args)
        finally:
            # Reported regardless of transport state, even when a write fails
            if self.reporter is not None:
                error = LoggedError(format_message((self._tag, *args)))
                self.reporter.report(error, {"logger": SERVER_REPORTER_LABEL})

    def replicants(self, *args: Any) -> None:
        if not self.config.replicants:
            return
        self.backend.info(self._tag, *args)

    @classmethod
    def global_reconfigure(cls, opts: Union[LoggerOptions, Mapping[str, Any], None] = None) -> None:
        """Partially merge ``opts`` and push the result onto the transports."""
        options = cls.config.merge(opts)
        _apply_config(cls.config, cls.backend, options)
        _log.debug("Reconfigured logger family: %s", cls.config.model_dump())


def _apply_config(config: LoggerConfig, backend: Backend, options: LoggerOptions) -> None:
    console = backend.transports[CONSOLE_TRANSPORT]
    console.silent = not config.console.enabled
    console.level = config.console.level

    file = backend.transports[FILE_TRANSPORT]
    file.silent = not config.file.enabled
    file.level = config.file.level

    if options.file is not None and options.file.path is not None:
        file.filename = config.file.path
        make_log_folder_if_missing(config.file.path)


def create_logger_factory(
    initial_opts: Union[LoggerOptions, Mapping[str, Any], None] = None,
    reporter: Any = None,
    *,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
    colorize: Optional[bool] = None,
) -> type[ServerLogger]:
    """
    Configure a backend and return a server logger class.

    Args:
        initial_opts: Partial configuration (console, file and replicants options)
        reporter: Optional error-reporting integration (``report``, sentry_sdk or raven style)
        stdout: Console transport output stream (default: sys.stdout at write time)
        stderr: Console transport stream for warn/error (default: sys.stderr at write time)
        colorize: Force console colors on/off; None detects a tty

    Returns:
        A ``ServerLogger`` subclass whose instances share one configuration and backend.
    """
    config = LoggerConfig()
    config.merge(initial_opts)

    console = ConsoleTransport(
        CONSOLE_TRANSPORT,
        level=config.console.level,
        silent=not config.console.enabled,
        stream=stdout,
        error_stream=stderr,
        colorize=colorize,
    )
    file = FileTransport(
        FILE_TRANSPORT,
        filename=config.file.path,
        level=config.file.level,
        silent=not config.file.enabled,
    )

    backend = Backend([console, file])
    backend.add_colors(DEFAULT_COLORS)
    make_log_folder_if_missing(config.file.path)

    return type(
        "ServerLogger",
        (ServerLogger,),
        {"__slots__": (), "config": config, "backend": backend, "reporter": as_reporter(reporter)},
    )


def create_logger_factory_from_settings(
    settings: Optional[LoggerSettings] = None,
    reporter: Any = None,
    **kwargs: Any,
) -> type[ServerLogger]:
    """Build a server logger family from ``NODECG_LOG_*`` environment settings."""
    settings = settings or LoggerSettings()
    return create_logger_factory(settings.to_options(), reporter, **kwargs)
