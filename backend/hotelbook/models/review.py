"""Review and review photo models."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from hotelbook.models.base import Base, TimestampMixin, UUIDMixin


def _rating_check(column: str, nullable: bool) -> CheckConstraint:
    condition = f"{column} >= 1 AND {column} <= 5"
    if nullable:
        condition = f"{column} IS NULL OR ({condition})"
    return CheckConstraint(condition, name=f"ck_reviews_{column}")


class Review(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "reviews"

    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=False, index=True)
    rating_overall = Column(Integer, nullable=False)
    rating_aesthetic = Column(Integer)
    rating_service = Column(Integer)
    rating_amenities = Column(Integer)
    title = Column(String(255))
    body = Column(Text)
    trip_type = Column(String(20))
    stay_date = Column(String(10))

    # Relationships
    user = relationship("Profile")
    hotel = relationship("Hotel", back_populates="reviews")
    photos = relationship(
        "ReviewPhoto",
        back_populates="review",
        order_by="[ReviewPhoto.created_at, ReviewPhoto.position]",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "hotel_id", name="uq_reviews_user_hotel"),
        _rating_check("rating_overall", nullable=False),
        _rating_check("rating_aesthetic", nullable=True),
        _rating_check("rating_service", nullable=True),
        _rating_check("rating_amenities", nullable=True),
    )


class ReviewPhoto(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "review_photos"

    review_id = Column(String(36), ForeignKey("reviews.id"), nullable=False, index=True)
    url = Column(String(500), nullable=False)
    # Index within the batch it was uploaded in
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    review = relationship("Review", back_populates="photos")
