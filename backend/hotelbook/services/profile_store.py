"""Profile store: lookups, creation, sparse updates and profile stats."""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.errors import NotFoundError, translate_integrity_error
from hotelbook.models.follow import Follow
from hotelbook.models.profile import Profile
from hotelbook.models.review import Review
from hotelbook.models.saved_list import ListItem, SavedList
from hotelbook.schemas.profile import (
    ProfileCreate,
    ProfileRead,
    ProfileUpdate,
    ProfileWithStats,
)

logger = logging.getLogger(__name__)


async def get_profile(db: AsyncSession, profile_id: str) -> ProfileRead | None:
    result = await db.execute(select(Profile).where(Profile.id == profile_id))
    profile = result.scalar_one_or_none()
    return ProfileRead.model_validate(profile) if profile else None


async def create_profile(db: AsyncSession, profile_id: str, data: ProfileCreate) -> ProfileRead:
    """Insert a profile under a caller-chosen id (the account id)."""
    profile = Profile(id=profile_id, **data.model_dump())
    db.add(profile)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise translate_integrity_error(e) from e

    logger.info(f"Created profile {profile_id}")
    return ProfileRead.model_validate(profile)


async def update_profile(db: AsyncSession, profile_id: str, patch: ProfileUpdate) -> ProfileRead:
    """Write only the fields present on ``patch``.

    Raises NotFoundError if no profile has this id.
    """
    values = patch.model_dump(exclude_unset=True)

    if values:
        try:
            result = await db.execute(
                update(Profile)
                .where(Profile.id == profile_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            raise translate_integrity_error(e) from e
        if result.rowcount == 0:
            raise NotFoundError("Profile", profile_id)

    # Bulk UPDATE bypasses the identity map; reload from the row
    result = await db.execute(
        select(Profile).where(Profile.id == profile_id).execution_options(populate_existing=True)
    )
    profile = result.scalar_one_or_none()
    if not profile:
        raise NotFoundError("Profile", profile_id)
    return ProfileRead.model_validate(profile)


async def get_profile_with_stats(db: AsyncSession, profile_id: str) -> ProfileWithStats | None:
    """Profile plus review, follower, following and saved-hotel counts."""
    review_count = (
        select(func.count(Review.id))
        .where(Review.user_id == Profile.id)
        .scalar_subquery()
    )
    follower_count = (
        select(func.count())
        .select_from(Follow)
        .where(Follow.following_id == Profile.id)
        .scalar_subquery()
    )
    following_count = (
        select(func.count())
        .select_from(Follow)
        .where(Follow.follower_id == Profile.id)
        .scalar_subquery()
    )
    saved_count = (
        select(func.count())
        .select_from(ListItem)
        .join(SavedList, ListItem.list_id == SavedList.id)
        .where(SavedList.user_id == Profile.id)
        .scalar_subquery()
    )

    result = await db.execute(
        select(
            Profile,
            review_count.label("review_count"),
            follower_count.label("follower_count"),
            following_count.label("following_count"),
            saved_count.label("saved_count"),
        ).where(Profile.id == profile_id)
    )
    row = result.one_or_none()
    if row is None:
        return None

    return ProfileWithStats(
        **ProfileRead.model_validate(row.Profile).model_dump(),
        review_count=row.review_count or 0,
        follower_count=row.follower_count or 0,
        following_count=row.following_count or 0,
        saved_count=row.saved_count or 0,
    )
