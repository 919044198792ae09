"""Hotel, tag and hotel-tag mapping models."""

from sqlalchemy import Column, Float, ForeignKey, String, Table, Text
from sqlalchemy.orm import relationship

from hotelbook.models.base import Base, TimestampMixin, UUIDMixin

hotel_tag_map = Table(
    "hotel_tag_map",
    Base.metadata,
    Column("hotel_id", String(36), ForeignKey("hotels.id"), primary_key=True),
    Column("tag_id", String(36), ForeignKey("hotel_tags.id"), primary_key=True),
)


class HotelTag(UUIDMixin, Base):
    __tablename__ = "hotel_tags"

    name = Column(String(50), unique=True, nullable=False)


class Hotel(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "hotels"

    name = Column(String(255), nullable=False)
    city = Column(String(100))
    country = Column(String(100))
    address = Column(String(255))
    lat = Column(Float)
    lng = Column(Float)
    # External place-search id, used to avoid importing the same hotel twice
    place_id = Column(String(255), unique=True)
    website_url = Column(String(500))
    phone = Column(String(50))
    price_tier = Column(String(4))
    cover_image_url = Column(String(500))
    description = Column(Text)

    # Relationships
    tags = relationship("HotelTag", secondary=hotel_tag_map, order_by="HotelTag.name")
    reviews = relationship("Review", back_populates="hotel")
