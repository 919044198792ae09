"""Pydantic schemas for Review and ReviewPhoto models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hotelbook.schemas.hotel import HotelSummary
from hotelbook.schemas.profile import ProfileSummary

TripType = Literal["honeymoon", "girls_trip", "solo", "work", "family", "couples", "friends"]


class ReviewBase(BaseModel):
    """Base fields for review."""

    rating_overall: int = Field(..., ge=1, le=5)
    rating_aesthetic: int | None = Field(None, ge=1, le=5)
    rating_service: int | None = Field(None, ge=1, le=5)
    rating_amenities: int | None = Field(None, ge=1, le=5)
    title: str | None = None
    body: str | None = None
    trip_type: str | None = None
    stay_date: str | None = None


class ReviewCreate(ReviewBase):
    """Fields for creating a review, optionally with photos."""

    user_id: str
    hotel_id: str
    trip_type: TripType | None = None
    photo_urls: list[str] = Field(default_factory=list)


class ReviewRead(ReviewBase):
    """Full review output."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    hotel_id: str
    created_at: datetime


class ReviewPhotoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    review_id: str
    url: str
    created_at: datetime


class ReviewPhotoUpload(BaseModel):
    urls: list[str] = Field(..., min_length=1)


class ReviewWithDetails(ReviewRead):
    """Review with its author, hotel and photos embedded."""

    user: ProfileSummary
    hotel: HotelSummary
    photos: list[ReviewPhotoRead] = Field(default_factory=list)
