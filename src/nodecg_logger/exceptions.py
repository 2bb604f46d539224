"""
Logger exceptions.

Configuration problems never raise (unknown levels drop output, malformed
fields fall back to defaults) and I/O errors propagate untouched, so the
hierarchy is small.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LoggerError(Exception):
    """Root of the package's exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class UnsupportedReporterError(LoggerError, TypeError):
    """The error-reporting integration matches no supported shape."""

    def __init__(self, integration: Any) -> None:
        type_name = type(integration).__name__
        super().__init__(
            f"Unsupported error reporter of type '{type_name}': expected report(), "
            "capture_exception() or captureException()",
            code="UNSUPPORTED_REPORTER",
            details={"type": type_name},
        )
