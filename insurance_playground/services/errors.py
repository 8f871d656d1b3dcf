"""Exception classes mapped to HTTP responses by the app's exception handlers."""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class PlaygroundError(Exception):
    """Base exception for all expected API failures."""

    status_code = 500

    def __init__(self, message: str, error: str = None, **extra):
        super().__init__(message)
        self.message = message
        self.error = error
        self.extra = extra


class ValidationError(PlaygroundError):
    """Missing or malformed input, or an invalid cross-entity reference."""

    status_code = 400


class AuthenticationError(PlaygroundError):
    """Credentials did not match."""

    status_code = 401


class NotFoundError(PlaygroundError):
    """No row matched the requested id."""

    status_code = 404


class ConflictError(PlaygroundError):
    """A uniqueness constraint was violated."""

    status_code = 409


class ReferentialBlockError(PlaygroundError):
    """Delete refused because dependent rows still reference the record."""

    status_code = 400


def is_unique_violation(exc: Exception, column: str = None) -> bool:
    """True when a database error came from a UNIQUE constraint.

    With ``column`` (``"table.column"``), only when that constraint fired.
    """
    if not isinstance(exc, IntegrityError):
        return False
    message = str(exc.orig).lower()
    if "unique" not in message:
        return False
    return column is None or column.lower() in message


@contextmanager
def failure_message(message: str):
    """Turn any unexpected exception into a logged 500 carrying ``message``."""
    try:
        yield
    except PlaygroundError:
        raise
    except Exception as e:
        logger.exception(message)
        raise PlaygroundError(message, error=str(e)) from e
