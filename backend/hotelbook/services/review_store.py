"""Review store: creating reviews and photos, and reading them with context."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotelbook.errors import translate_integrity_error
from hotelbook.models.base import utcnow
from hotelbook.models.review import Review, ReviewPhoto
from hotelbook.schemas.review import (
    ReviewCreate,
    ReviewPhotoRead,
    ReviewRead,
    ReviewWithDetails,
)

logger = logging.getLogger(__name__)


def _with_details():
    return (
        select(Review)
        .options(
            selectinload(Review.user),
            selectinload(Review.hotel),
            selectinload(Review.photos),
        )
        .execution_options(populate_existing=True)
    )


def _new_photos(review_id: str, urls: list[str]) -> list[ReviewPhoto]:
    # One timestamp per batch; position keeps the upload order within it
    created_at = utcnow()
    return [
        ReviewPhoto(review_id=review_id, url=url, position=position, created_at=created_at)
        for position, url in enumerate(urls)
    ]


async def create_review(db: AsyncSession, review: ReviewCreate) -> ReviewRead:
    """Insert a review and its photos as one unit.

    Ratings are range-checked when ``review`` is built, before any SQL runs.
    A second review by the same user for the same hotel raises
    DuplicateKeyError and nothing is written.
    """
    row = Review(**review.model_dump(exclude={"photo_urls"}))
    db.add(row)
    try:
        await db.flush()
        db.add_all(_new_photos(row.id, review.photo_urls))
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise translate_integrity_error(e) from e

    logger.info(
        f"Created review {row.id} by {row.user_id} for hotel {row.hotel_id} "
        f"with {len(review.photo_urls)} photos"
    )
    return ReviewRead.model_validate(row)


async def add_review_photos(db: AsyncSession, review_id: str, urls: list[str]) -> list[ReviewPhotoRead]:
    """Attach photos to an existing review, returned in the order given.

    An unknown ``review_id`` raises ReferentialError.
    """
    if not urls:
        return []

    photos = _new_photos(review_id, urls)
    db.add_all(photos)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise translate_integrity_error(e) from e

    return [ReviewPhotoRead.model_validate(photo) for photo in photos]


async def get_review(db: AsyncSession, review_id: str) -> ReviewWithDetails | None:
    result = await db.execute(_with_details().where(Review.id == review_id))
    review = result.scalar_one_or_none()
    return ReviewWithDetails.model_validate(review) if review else None


async def get_hotel_reviews(db: AsyncSession, hotel_id: str) -> list[ReviewWithDetails]:
    """Reviews of a hotel, newest first."""
    result = await db.execute(
        _with_details()
        .where(Review.hotel_id == hotel_id)
        .order_by(Review.created_at.desc(), Review.id)
    )
    return [ReviewWithDetails.model_validate(r) for r in result.scalars().all()]


async def get_user_reviews(db: AsyncSession, user_id: str) -> list[ReviewWithDetails]:
    """Reviews written by a user, newest first."""
    result = await db.execute(
        _with_details()
        .where(Review.user_id == user_id)
        .order_by(Review.created_at.desc(), Review.id)
    )
    return [ReviewWithDetails.model_validate(r) for r in result.scalars().all()]


async def get_reviews_by_authors(
    db: AsyncSession,
    user_ids: list[str],
    limit: int,
) -> list[ReviewWithDetails]:
    """Most recent reviews written by any of ``user_ids``, newest first.

    ``user_ids`` must not be empty.
    """
    result = await db.execute(
        _with_details()
        .where(Review.user_id.in_(user_ids))
        .order_by(Review.created_at.desc(), Review.id)
        .limit(limit)
    )
    return [ReviewWithDetails.model_validate(r) for r in result.scalars().all()]
