"""Feed service: recent reviews from the people a user follows."""

from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.config import get_settings
from hotelbook.schemas.feed import FeedItem
from hotelbook.services import follow_store, review_store


async def get_feed(db: AsyncSession, user_id: str, limit: int | None = None) -> list[FeedItem]:
    """Newest reviews written by anyone ``user_id`` follows.

    Capped at ``limit`` (``settings.feed_limit`` by default). Returns an
    empty list without querying reviews when the user follows nobody.
    """
    if limit is None:
        limit = get_settings().feed_limit

    following_ids = await follow_store.get_following_ids(db, user_id)
    if not following_ids:
        return []

    reviews = await review_store.get_reviews_by_authors(db, following_ids, limit)
    return [FeedItem(review=review, friend=review.user) for review in reviews]
