"""
Error monitoring sinks.

Private errors (database and driver failures) are reported to a sink instead
of the caller. The sink is built once from settings and handed to the app.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

import sentry_sdk

logger = logging.getLogger(__name__)


class ErrorSink(ABC):
    """Destination for private errors."""

    @abstractmethod
    def capture(self, error: BaseException) -> None:
        """Report an error. Must be implemented by subclasses."""
        pass


class LoggingErrorSink(ErrorSink):
    """Logs private errors with their traceback."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def capture(self, error: BaseException) -> None:
        self.log.error(f"Private error: {error!r}", exc_info=(type(error), error, error.__traceback__))


class SentryErrorSink(LoggingErrorSink):
    """Forwards private errors to Sentry, and logs them locally."""

    def __init__(self, dsn: str, log: Optional[logging.Logger] = None):
        super().__init__(log)
        self.dsn = dsn
        sentry_sdk.init(dsn=dsn)
        logger.info("Sentry error reporting enabled")

    def capture(self, error: BaseException) -> None:
        super().capture(error)
        sentry_sdk.capture_exception(error)


def build_error_sink(settings) -> ErrorSink:
    """Sentry sink when a DSN is configured, logging sink otherwise."""
    if settings.sentry_dsn:
        return SentryErrorSink(settings.sentry_dsn)
    return LoggingErrorSink()
