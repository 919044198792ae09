"""Pydantic schemas for the activity feed and analytics events."""

from typing import Any

from pydantic import BaseModel, Field

from hotelbook.schemas.profile import ProfileSummary
from hotelbook.schemas.review import ReviewWithDetails


class FeedItem(BaseModel):
    """A review written by someone the viewer follows."""

    review: ReviewWithDetails
    friend: ProfileSummary


class EventCreate(BaseModel):
    user_id: str | None = None
    event_name: str = Field(..., min_length=1, max_length=100)
    payload: dict[str, Any] = Field(default_factory=dict)
