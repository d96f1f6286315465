"""Logger adapter writing to Logfire.

Messages become Logfire log records at the matching level; exceptions are
attached as exception info so the whole cause chain shows up in the trace.
"""

from typing import Any

import logfire

from taarafo.domain.logger import Logger


class LogfireLogger(Logger):
    """Logger implementation on top of the global Logfire instance."""

    def log_trace(self, message: str) -> None:
        logfire.trace(message)

    def log_debug(self, message: str) -> None:
        logfire.debug(message)

    def log_information(self, message: str) -> None:
        logfire.info(message)

    def log_warning(self, message: str) -> None:
        logfire.warn(message)

    def log_error(self, exception: BaseException) -> None:
        logfire.error(
            "{error_type}: {error}",
            _exc_info=exception,
            **_describe(exception),
        )

    def log_critical(self, exception: BaseException) -> None:
        logfire.fatal(
            "{error_type}: {error}",
            _exc_info=exception,
            **_describe(exception),
        )


def _describe(exception: BaseException) -> dict[str, Any]:
    """Structured attributes for an exception, including the post error kind."""
    attributes: dict[str, Any] = {
        "error_type": type(exception).__name__,
        "error": str(exception),
    }
    kind = getattr(exception, "kind", None)
    if kind is not None:
        attributes["error_kind"] = getattr(kind, "value", str(kind))
    cause = exception.__cause__
    while cause is not None and cause.__cause__ is not None:
        cause = cause.__cause__
    if cause is not None:
        attributes["root_cause_type"] = type(cause).__name__
    return attributes
