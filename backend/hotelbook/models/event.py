"""Analytics events: best-effort usage telemetry."""

from sqlalchemy import JSON, Column, ForeignKey, String

from hotelbook.models.base import Base, TimestampMixin, UUIDMixin


class Event(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "events"

    user_id = Column(String(36), ForeignKey("profiles.id"), index=True)
    event_name = Column(String(100), nullable=False, index=True)
    payload = Column(JSON, nullable=False, default=dict)
