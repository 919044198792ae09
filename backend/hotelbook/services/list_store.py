"""List store: saved-hotel lists and their memberships."""

import logging

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.config import get_settings
from hotelbook.database import IMMEDIATE
from hotelbook.errors import DuplicateKeyError, translate_integrity_error
from hotelbook.models.saved_list import ListItem, SavedList
from hotelbook.schemas.saved_list import ListRead, ListWithCount, ListWithHotels
from hotelbook.services import hotel_store

logger = logging.getLogger(__name__)


async def get_user_lists(db: AsyncSession, user_id: str) -> list[ListWithCount]:
    """A user's lists with item counts; the default list comes first."""
    hotel_count = (
        select(func.count())
        .select_from(ListItem)
        .where(ListItem.list_id == SavedList.id)
        .scalar_subquery()
    )
    result = await db.execute(
        select(SavedList, hotel_count.label("hotel_count"))
        .where(SavedList.user_id == user_id)
        .order_by(SavedList.is_default.desc(), SavedList.created_at.desc())
    )
    return [
        ListWithCount(
            **ListRead.model_validate(row.SavedList).model_dump(),
            hotel_count=row.hotel_count or 0,
        )
        for row in result
    ]


async def get_or_create_default_list(db: AsyncSession, user_id: str) -> ListRead:
    """Return the user's default list, creating it on first use.

    The lookup and the insert share one transaction that holds the write
    lock from the start, so concurrent callers queue behind the first one
    and read the list it created.
    """
    settings = get_settings()
    if db.in_transaction():
        await db.commit()
    try:
        await db.connection(execution_options={IMMEDIATE: True})
        result = await db.execute(
            select(SavedList)
            .where(SavedList.user_id == user_id, SavedList.is_default == True)  # noqa: E712
            .order_by(SavedList.created_at)
            .limit(1)
        )
        saved_list = result.scalar_one_or_none()
        if saved_list:
            await db.commit()
            return ListRead.model_validate(saved_list)

        saved_list = SavedList(user_id=user_id, name=settings.default_list_name, is_default=True)
        db.add(saved_list)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise translate_integrity_error(e) from e

    logger.info(f"Created default list {saved_list.id} for user {user_id}")
    return ListRead.model_validate(saved_list)


async def create_list(db: AsyncSession, user_id: str, name: str) -> ListRead:
    """Create a non-default list. Names need not be unique per user."""
    saved_list = SavedList(user_id=user_id, name=name, is_default=False)
    db.add(saved_list)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise translate_integrity_error(e) from e
    return ListRead.model_validate(saved_list)


async def save_hotel_to_list(db: AsyncSession, list_id: str, hotel_id: str) -> None:
    """Add a hotel to a list. Saving it again is a no-op."""
    try:
        async with db.begin_nested():
            await db.execute(insert(ListItem).values(list_id=list_id, hotel_id=hotel_id))
    except IntegrityError as e:
        error = translate_integrity_error(e)
        if not isinstance(error, DuplicateKeyError):
            await db.rollback()
            raise error from e
    await db.commit()


async def remove_hotel_from_list(db: AsyncSession, list_id: str, hotel_id: str) -> None:
    """Remove a hotel from a list. Removing an absent hotel is a no-op."""
    await db.execute(
        delete(ListItem).where(ListItem.list_id == list_id, ListItem.hotel_id == hotel_id)
    )
    await db.commit()


async def is_hotel_saved(db: AsyncSession, user_id: str, hotel_id: str) -> bool:
    """True if the hotel is in any of the user's lists, default or not."""
    result = await db.execute(
        select(ListItem.list_id)
        .join(SavedList, ListItem.list_id == SavedList.id)
        .where(SavedList.user_id == user_id, ListItem.hotel_id == hotel_id)
        .limit(1)
    )
    return result.scalar_one_or_none() is not None


async def get_list_with_hotels(db: AsyncSession, list_id: str) -> ListWithHotels | None:
    """A list with its hotels in the order they were added, all marked saved."""
    result = await db.execute(select(SavedList).where(SavedList.id == list_id))
    saved_list = result.scalar_one_or_none()
    if not saved_list:
        return None

    result = await db.execute(
        select(ListItem.hotel_id)
        .where(ListItem.list_id == list_id)
        .order_by(ListItem.created_at, ListItem.hotel_id)
    )
    hotels = await hotel_store.get_hotels_by_ids(db, list(result.scalars().all()))

    # Membership in this list already means saved, whoever is looking
    return ListWithHotels(
        **ListRead.model_validate(saved_list).model_dump(),
        hotels=[hotel.model_copy(update={"is_saved": True}) for hotel in hotels],
    )
