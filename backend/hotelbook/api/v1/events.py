"""Analytics event endpoint."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.dependencies.db import get_db
from hotelbook.schemas.feed import EventCreate
from hotelbook.services import event_service

router = APIRouter(prefix="/events", tags=["events"])


@router.post("", status_code=204)
async def track_event(event: EventCreate, db: AsyncSession = Depends(get_db)):
    """Record a usage event. Always 204; failures are only logged."""
    await event_service.track_event(db, event.user_id, event.event_name, event.payload)
    return Response(status_code=204)
