"""Pydantic schemas for saved lists."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from hotelbook.schemas.hotel import HotelWithDetails


class ListCreate(BaseModel):
    user_id: str
    name: str = Field(..., min_length=1, max_length=100)


class ListRead(BaseModel):
    """Full list output."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    is_default: bool
    created_at: datetime


class ListWithCount(ListRead):
    hotel_count: int = 0


class ListWithHotels(ListRead):
    """List with its member hotels, all flagged as saved."""

    hotels: list[HotelWithDetails] = Field(default_factory=list)
