"""Store error taxonomy and translation of engine integrity errors.

Lookups never raise for a missing row; they return ``None``. The classes
below cover everything else a store call can surface.
"""

from sqlalchemy.exc import IntegrityError


class StoreError(Exception):
    """Base class for errors raised by the entity stores."""


class NotFoundError(StoreError):
    """A mutating operation targeted a row that does not exist."""

    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key} not found")


class ConstraintViolation(StoreError):
    """A uniqueness, CHECK or NOT NULL constraint rejected the write."""


class DuplicateKeyError(ConstraintViolation):
    """A UNIQUE or PRIMARY KEY constraint rejected the write."""


class ReferentialError(StoreError):
    """A FOREIGN KEY constraint rejected the write."""


class SchemaInitializationError(StoreError):
    """The schema could not be created; the store is unusable."""


def translate_integrity_error(exc: IntegrityError) -> StoreError:
    """Map an ``IntegrityError`` to the matching store error.

    SQLite reports the failing constraint kind only in the message text,
    e.g. ``UNIQUE constraint failed: reviews.user_id, reviews.hotel_id``.
    """
    message = str(exc.orig) if exc.orig is not None else str(exc)
    upper = message.upper()

    if "UNIQUE CONSTRAINT" in upper or "PRIMARY KEY" in upper:
        error: StoreError = DuplicateKeyError(message)
    elif "FOREIGN KEY" in upper:
        error = ReferentialError(message)
    else:
        error = ConstraintViolation(message)
    error.__cause__ = exc
    return error
