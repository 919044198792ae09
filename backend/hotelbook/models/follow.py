"""Follow edges between profiles."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, String

from hotelbook.models.base import Base, TimestampMixin


class Follow(TimestampMixin, Base):
    __tablename__ = "follows"

    follower_id = Column(String(36), ForeignKey("profiles.id"), primary_key=True)
    following_id = Column(String(36), ForeignKey("profiles.id"), primary_key=True, index=True)

    __table_args__ = (
        CheckConstraint("follower_id <> following_id", name="ck_follows_not_self"),
    )
