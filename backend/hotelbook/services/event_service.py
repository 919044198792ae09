"""Analytics events. Tracking is best-effort and never fails the caller."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.models.event import Event

logger = logging.getLogger(__name__)


async def track_event(
    db: AsyncSession,
    user_id: str | None,
    event_name: str,
    payload: dict[str, Any] | None = None,
) -> bool:
    """Record an event. Returns False (and logs) if the write failed."""
    try:
        db.add(Event(user_id=user_id, event_name=event_name, payload=payload or {}))
        await db.commit()
        return True
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning(f"Failed to track event {event_name}: {e}")
        return False
