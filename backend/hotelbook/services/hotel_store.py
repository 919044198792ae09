"""Hotel and tag store: search, detail lookup and review aggregates.

The hotel queries are viewer-agnostic: every ``HotelWithDetails`` they
return has ``is_saved=False``. Callers that show hotels to a particular
user must pass the results through :func:`mark_saved`.
"""

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotelbook.errors import translate_integrity_error
from hotelbook.models.hotel import Hotel, HotelTag
from hotelbook.models.review import Review
from hotelbook.models.saved_list import ListItem, SavedList
from hotelbook.schemas.hotel import (
    HotelCreate,
    HotelFilters,
    HotelRead,
    HotelTagRead,
    HotelWithDetails,
)

logger = logging.getLogger(__name__)


def _aggregates():
    avg_rating = (
        select(func.avg(Review.rating_overall))
        .where(Review.hotel_id == Hotel.id)
        .scalar_subquery()
    )
    review_count = (
        select(func.count(Review.id))
        .where(Review.hotel_id == Hotel.id)
        .scalar_subquery()
    )
    return avg_rating, review_count


def _details_query():
    avg_rating, review_count = _aggregates()
    query = (
        select(Hotel, avg_rating.label("avg_rating"), review_count.label("review_count"))
        .options(selectinload(Hotel.tags))
    )
    return query, avg_rating


def _to_details(row) -> HotelWithDetails:
    hotel = row.Hotel
    return HotelWithDetails(
        **HotelRead.model_validate(hotel).model_dump(),
        tags=[HotelTagRead.model_validate(tag) for tag in sorted(hotel.tags, key=lambda t: t.name)],
        avg_rating=float(row.avg_rating) if row.avg_rating is not None else None,
        review_count=row.review_count or 0,
        is_saved=False,
    )


async def get_hotels(db: AsyncSession, filters: HotelFilters | None = None) -> list[HotelWithDetails]:
    """All hotels matching ``filters``, ordered by name. No pagination."""
    query, avg_rating = _details_query()
    filters = filters or HotelFilters()

    if filters.query:
        query = query.where(
            or_(
                Hotel.name.icontains(filters.query, autoescape=True),
                Hotel.city.icontains(filters.query, autoescape=True),
                Hotel.country.icontains(filters.query, autoescape=True),
            )
        )
    if filters.bounds:
        bounds = filters.bounds
        query = query.where(
            Hotel.lat >= bounds.south,
            Hotel.lat <= bounds.north,
            Hotel.lng >= bounds.west,
            Hotel.lng <= bounds.east,
        )
    if filters.price_tiers:
        query = query.where(Hotel.price_tier.in_(filters.price_tiers))
    if filters.tags:
        query = query.where(Hotel.tags.any(HotelTag.name.in_(filters.tags)))
    if filters.min_rating is not None:
        # Unrated hotels have a NULL average and drop out here
        query = query.where(avg_rating >= filters.min_rating)

    query = query.order_by(Hotel.name, Hotel.id)
    result = await db.execute(query)
    return [_to_details(row) for row in result]


async def get_hotel(db: AsyncSession, hotel_id: str) -> HotelWithDetails | None:
    query, _ = _details_query()
    result = await db.execute(query.where(Hotel.id == hotel_id))
    row = result.one_or_none()
    return _to_details(row) if row else None


async def get_hotels_by_ids(db: AsyncSession, hotel_ids: list[str]) -> list[HotelWithDetails]:
    """Hotels for ``hotel_ids`` in the same order; unknown ids are skipped."""
    if not hotel_ids:
        return []

    query, _ = _details_query()
    result = await db.execute(query.where(Hotel.id.in_(hotel_ids)))
    by_id = {row.Hotel.id: _to_details(row) for row in result}
    return [by_id[hotel_id] for hotel_id in hotel_ids if hotel_id in by_id]


async def mark_saved(
    db: AsyncSession,
    hotels: list[HotelWithDetails],
    viewer_id: str | None,
) -> list[HotelWithDetails]:
    """Return copies of ``hotels`` with ``is_saved`` set for ``viewer_id``.

    A hotel counts as saved when it is in any of the viewer's lists. With
    no viewer every flag is False.
    """
    if not viewer_id or not hotels:
        return [hotel.model_copy(update={"is_saved": False}) for hotel in hotels]

    result = await db.execute(
        select(ListItem.hotel_id)
        .join(SavedList, ListItem.list_id == SavedList.id)
        .where(
            SavedList.user_id == viewer_id,
            ListItem.hotel_id.in_([hotel.id for hotel in hotels]),
        )
        .distinct()
    )
    saved_ids = set(result.scalars().all())
    return [hotel.model_copy(update={"is_saved": hotel.id in saved_ids}) for hotel in hotels]


async def _resolve_tags(db: AsyncSession, names: list[str]) -> list[HotelTag]:
    tags = []
    for name in dict.fromkeys(names):
        result = await db.execute(select(HotelTag).where(HotelTag.name == name))
        tag = result.scalar_one_or_none()
        if not tag:
            tag = HotelTag(name=name)
            db.add(tag)
        tags.append(tag)
    return tags


async def create_hotel(db: AsyncSession, data: HotelCreate) -> HotelWithDetails:
    """Insert a hotel, creating any of its tags that do not exist yet.

    A duplicate ``place_id`` raises DuplicateKeyError.
    """
    hotel = Hotel(**data.model_dump(exclude={"tags"}))
    try:
        hotel.tags = await _resolve_tags(db, data.tags)
        db.add(hotel)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise translate_integrity_error(e) from e

    logger.info(f"Created hotel {hotel.id} ({hotel.name})")
    return await get_hotel(db, hotel.id)


async def get_all_tags(db: AsyncSession) -> list[HotelTagRead]:
    result = await db.execute(select(HotelTag).order_by(HotelTag.name))
    return [HotelTagRead.model_validate(tag) for tag in result.scalars().all()]
