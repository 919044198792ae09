"""ORM models. Importing this package registers every table on ``Base.metadata``."""

from hotelbook.models.base import Base
from hotelbook.models.profile import Profile
from hotelbook.models.hotel import Hotel, HotelTag, hotel_tag_map
from hotelbook.models.review import Review, ReviewPhoto
from hotelbook.models.saved_list import SavedList, ListItem
from hotelbook.models.follow import Follow
from hotelbook.models.event import Event

__all__ = [
    "Base",
    "Profile",
    "Hotel",
    "HotelTag",
    "hotel_tag_map",
    "Review",
    "ReviewPhoto",
    "SavedList",
    "ListItem",
    "Follow",
    "Event",
]
