"""Pydantic schemas package."""

from hotelbook.schemas.profile import (
    ProfileBase,
    ProfileCreate,
    ProfileUpdate,
    ProfileRead,
    ProfileSummary,
    ProfileWithStats,
)
from hotelbook.schemas.hotel import (
    PriceTier,
    HotelTagRead,
    HotelBase,
    HotelCreate,
    HotelRead,
    HotelWithDetails,
    HotelSummary,
    Bounds,
    HotelFilters,
)
from hotelbook.schemas.review import (
    TripType,
    ReviewBase,
    ReviewCreate,
    ReviewRead,
    ReviewPhotoRead,
    ReviewPhotoUpload,
    ReviewWithDetails,
)
from hotelbook.schemas.saved_list import (
    ListCreate,
    ListRead,
    ListWithCount,
    ListWithHotels,
)
from hotelbook.schemas.feed import FeedItem, EventCreate

__all__ = [
    # Profile
    "ProfileBase",
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileRead",
    "ProfileSummary",
    "ProfileWithStats",
    # Hotel
    "PriceTier",
    "HotelTagRead",
    "HotelBase",
    "HotelCreate",
    "HotelRead",
    "HotelWithDetails",
    "HotelSummary",
    "Bounds",
    "HotelFilters",
    # Review
    "TripType",
    "ReviewBase",
    "ReviewCreate",
    "ReviewRead",
    "ReviewPhotoRead",
    "ReviewPhotoUpload",
    "ReviewWithDetails",
    # List
    "ListCreate",
    "ListRead",
    "ListWithCount",
    "ListWithHotels",
    # Feed / events
    "FeedItem",
    "EventCreate",
]
