import pytest
from sqlalchemy import func, select

from hotelbook.errors import ConstraintViolation, DuplicateKeyError, ReferentialError
from hotelbook.ids import new_id
from hotelbook.models import Follow
from hotelbook.services import follow_store


async def test_follow_twice_keeps_one_row(db, make_profile):
    a = await make_profile()
    b = await make_profile()

    await follow_store.follow_user(db, a.id, b.id)
    await follow_store.follow_user(db, a.id, b.id)

    count = await db.execute(
        select(func.count()).select_from(Follow).where(Follow.follower_id == a.id, Follow.following_id == b.id)
    )
    assert count.scalar() == 1
    assert await follow_store.is_following(db, a.id, b.id)
    assert not await follow_store.is_following(db, b.id, a.id)


async def test_unfollow_is_idempotent(db, make_profile):
    a = await make_profile()
    b = await make_profile()
    await follow_store.follow_user(db, a.id, b.id)

    await follow_store.unfollow_user(db, a.id, b.id)
    await follow_store.unfollow_user(db, a.id, b.id)

    assert not await follow_store.is_following(db, a.id, b.id)


async def test_followers_and_following(db, make_profile):
    alice = await make_profile(username="alice")
    bob = await make_profile(username="bob")
    carol = await make_profile(username="carol")

    await follow_store.follow_user(db, bob.id, alice.id)
    await follow_store.follow_user(db, carol.id, alice.id)
    await follow_store.follow_user(db, alice.id, carol.id)

    followers = await follow_store.get_followers(db, alice.id)
    assert [p.username for p in followers] == ["bob", "carol"]

    following = await follow_store.get_following(db, alice.id)
    assert [p.username for p in following] == ["carol"]

    assert [p.id for p in await follow_store.get_following(db, bob.id)] == [alice.id]
    assert await follow_store.get_following_ids(db, alice.id) == [carol.id]


async def test_self_follow_is_rejected(db, make_profile):
    a = await make_profile()

    with pytest.raises(ConstraintViolation) as excinfo:
        await follow_store.follow_user(db, a.id, a.id)

    assert not isinstance(excinfo.value, DuplicateKeyError)
    assert not await follow_store.is_following(db, a.id, a.id)


async def test_follow_unknown_profile(db, make_profile):
    a = await make_profile()
    with pytest.raises(ReferentialError):
        await follow_store.follow_user(db, a.id, new_id())
