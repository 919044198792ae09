"""Pydantic schemas for Hotel and HotelTag models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PriceTier = Literal["$", "$$", "$$$", "$$$$"]


class HotelTagRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class HotelBase(BaseModel):
    """Base fields for hotel."""

    name: str
    city: str | None = None
    country: str | None = None
    address: str | None = None
    lat: float | None = None
    lng: float | None = None
    place_id: str | None = None
    website_url: str | None = None
    phone: str | None = None
    price_tier: str | None = None
    cover_image_url: str | None = None
    description: str | None = None


class HotelCreate(HotelBase):
    """Fields for creating a hotel. Tags are given by name and created on demand."""

    price_tier: PriceTier | None = None
    tags: list[str] = Field(default_factory=list)


class HotelRead(HotelBase):
    """Full hotel output."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime


class HotelWithDetails(HotelRead):
    """Hotel with tags and review aggregates.

    ``is_saved`` is viewer-specific and is never filled in by the hotel
    queries; pass results through ``hotel_store.mark_saved`` before handing
    them to a viewer.
    """

    tags: list[HotelTagRead] = Field(default_factory=list)
    avg_rating: float | None = None
    review_count: int = 0
    is_saved: bool = False


class HotelSummary(BaseModel):
    """Minimal hotel info for nested responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    city: str | None = None
    country: str | None = None
    cover_image_url: str | None = None


class Bounds(BaseModel):
    """Geographic bounding box, edges inclusive."""

    north: float
    south: float
    east: float
    west: float


class HotelFilters(BaseModel):
    """Optional narrowing for hotel search. Unset filters do not apply."""

    query: str | None = None
    bounds: Bounds | None = None
    price_tiers: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    min_rating: float | None = Field(None, ge=1, le=5)
