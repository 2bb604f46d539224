"""
Error-reporting integrations.

Every ``error`` call of a server logger with an attached reporter builds a
``LoggedError`` carrying the formatted message and hands it to
``ErrorReporter.report``. Two third-party client shapes are adapted:

- sentry_sdk style: ``capture_exception(error, tags=...)``
- raven style: ``captureException(exc_info=..., data=...)``
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from .exceptions import UnsupportedReporterError

SERVER_REPORTER_LABEL = "server nodecg-logger"


class LoggedError(Exception):
    """Carrier for a logged error message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@runtime_checkable
class ErrorReporter(Protocol):
    def report(self, error: BaseException, context: Mapping[str, str]) -> None: ...


class SentryReporter:
    """Adapter for ``sentry_sdk`` (module, Hub or Scope)."""

    def __init__(self, client: Any):
        self._client = client

    def report(self, error: BaseException, context: Mapping[str, str]) -> None:
        self._client.capture_exception(error, tags=dict(context))


class RavenReporter:
    """Adapter for a legacy ``raven.Client``."""

    def __init__(self, client: Any):
        self._client = client

    def report(self, error: BaseException, context: Mapping[str, str]) -> None:
        self._client.captureException(
            exc_info=(type(error), error, error.__traceback__),
            data=dict(context),
        )


def as_reporter(integration: Any) -> Optional[ErrorReporter]:
    """Wrap ``integration`` in the matching adapter."""
    if integration is None:
        return None
    if callable(getattr(integration, "report", None)):
        return integration
    if callable(getattr(integration, "capture_exception", None)):
        return SentryReporter(integration)
    if callable(getattr(integration, "captureException", None)):
        return RavenReporter(integration)
    raise UnsupportedReporterError(integration)
