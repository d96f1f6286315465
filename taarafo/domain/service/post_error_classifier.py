"""Translate low-level failures into post domain errors.

Every function here is pure: it picks the domain error and the severity it
should be logged at, and leaves logging and raising to the caller.

    | Low-level failure                        | Domain error                          | Severity |
    | ---------------------------------------- | ------------------------------------- | -------- |
    | StaleDataError                           | PostDependencyError(LOCKED)           | ERROR    |
    | IntegrityError (unique / primary key)    | PostDependencyValidationError(...)    | ERROR    |
    | IntegrityError, DataError, FlushError    | PostDependencyError(FAILED_STORAGE)   | ERROR    |
    | any other SQLAlchemyError                | PostDependencyError(FAILED_STORAGE)   | CRITICAL |
    | anything else                            | PostServiceError(FAILED_SERVICE)      | ERROR    |
"""

from enum import Enum

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import FlushError, StaleDataError

from taarafo.domain.error import (
    PostDependencyError,
    PostDependencyValidationError,
    PostError,
    PostOperationError,
    PostServiceError,
)

# https://www.postgresql.org/docs/current/errcodes-appendix.html
UNIQUE_VIOLATION = "23505"

_UNIQUE_KEYWORDS = (
    "unique constraint",
    "unique failed",
    "unique violation",
    "duplicate key",
    "duplicate entry",
)

# Errors raised while writing rows rather than by the engine itself
_UPDATE_ERRORS = (IntegrityError, DataError, FlushError)


class Severity(str, Enum):
    """Log level a classified failure is recorded at."""

    CRITICAL = "critical"
    ERROR = "error"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell whether an IntegrityError comes from a duplicate key.

    Prefers the Postgres SQLSTATE exposed by the driver and falls back to
    message sniffing for other backends.
    """
    orig = exc.orig
    pgcode = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if pgcode:
        return pgcode == UNIQUE_VIOLATION

    message = str(orig if orig is not None else exc).lower()
    return any(keyword in message for keyword in _UNIQUE_KEYWORDS)


def classify_storage_error(error: Exception) -> tuple[PostOperationError, Severity]:
    """Map a failure raised by the storage broker to a domain error.

    Args:
        error: Whatever the storage call raised

    Returns:
        The domain error to raise and the severity to log it at
    """
    if isinstance(error, StaleDataError):
        return PostDependencyError(PostError.locked(error)), Severity.ERROR

    if isinstance(error, IntegrityError) and is_unique_violation(error):
        return (
            PostDependencyValidationError(PostError.already_exists(error)),
            Severity.ERROR,
        )

    if isinstance(error, _UPDATE_ERRORS):
        return PostDependencyError(PostError.failed_storage(error)), Severity.ERROR

    if isinstance(error, SQLAlchemyError):
        return PostDependencyError(PostError.failed_storage(error)), Severity.CRITICAL

    return classify_service_error(error)


def classify_service_error(error: Exception) -> tuple[PostOperationError, Severity]:
    """Map an unexpected, non-storage failure to a domain error."""
    return PostServiceError(PostError.failed_service(error)), Severity.ERROR
