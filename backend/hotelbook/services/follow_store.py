"""Follow store: directed follow edges between profiles."""

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.errors import DuplicateKeyError, translate_integrity_error
from hotelbook.models.follow import Follow
from hotelbook.models.profile import Profile
from hotelbook.schemas.profile import ProfileRead


async def follow_user(db: AsyncSession, follower_id: str, following_id: str) -> None:
    """Follow a profile. Following again is a no-op.

    Following yourself is rejected by the schema with ConstraintViolation;
    an unknown profile raises ReferentialError.
    """
    try:
        async with db.begin_nested():
            await db.execute(
                insert(Follow).values(follower_id=follower_id, following_id=following_id)
            )
    except IntegrityError as e:
        error = translate_integrity_error(e)
        if not isinstance(error, DuplicateKeyError):
            await db.rollback()
            raise error from e
    await db.commit()


async def unfollow_user(db: AsyncSession, follower_id: str, following_id: str) -> None:
    """Stop following a profile. Unfollowing someone not followed is a no-op."""
    await db.execute(
        delete(Follow).where(Follow.follower_id == follower_id, Follow.following_id == following_id)
    )
    await db.commit()


async def get_followers(db: AsyncSession, user_id: str) -> list[ProfileRead]:
    """Profiles following ``user_id``, in the order they followed."""
    result = await db.execute(
        select(Profile)
        .join(Follow, Follow.follower_id == Profile.id)
        .where(Follow.following_id == user_id)
        .order_by(Follow.created_at, Profile.id)
    )
    return [ProfileRead.model_validate(p) for p in result.scalars().all()]


async def get_following(db: AsyncSession, user_id: str) -> list[ProfileRead]:
    """Profiles ``user_id`` follows, in the order they were followed."""
    result = await db.execute(
        select(Profile)
        .join(Follow, Follow.following_id == Profile.id)
        .where(Follow.follower_id == user_id)
        .order_by(Follow.created_at, Profile.id)
    )
    return [ProfileRead.model_validate(p) for p in result.scalars().all()]


async def get_following_ids(db: AsyncSession, user_id: str) -> list[str]:
    result = await db.execute(
        select(Follow.following_id).where(Follow.follower_id == user_id)
    )
    return list(result.scalars().all())


async def is_following(db: AsyncSession, follower_id: str, following_id: str) -> bool:
    result = await db.execute(
        select(Follow.follower_id)
        .where(Follow.follower_id == follower_id, Follow.following_id == following_id)
        .limit(1)
    )
    return result.scalar_one_or_none() is not None
