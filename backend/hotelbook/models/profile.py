"""Profile model: one row per account."""

from sqlalchemy import Column, String, Text

from hotelbook.models.base import Base, TimestampMixin


class Profile(TimestampMixin, Base):
    __tablename__ = "profiles"

    # Supplied by the caller: profile creation is tied to account creation.
    id = Column(String(36), primary_key=True)
    username = Column(String(50), unique=True)
    full_name = Column(String(120))
    avatar_url = Column(String(500))
    bio = Column(Text)
    home_city = Column(String(100))
