"""Declarative base and column mixins."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import DeclarativeBase

from hotelbook.ids import new_id


def utcnow() -> datetime:
    # Naive UTC: SQLite DATETIME columns do not keep an offset
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    # Set client-side: SQLite's CURRENT_TIMESTAMP only has second resolution,
    # and several queries order by creation time.
    created_at = Column(
        DateTime,
        default=utcnow,
        nullable=False,
    )


class UUIDMixin:
    id = Column(
        String(36),
        primary_key=True,
        default=new_id,
    )
