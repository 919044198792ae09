import pytest

from hotelbook.errors import DuplicateKeyError, NotFoundError
from hotelbook.ids import new_id
from hotelbook.schemas.profile import ProfileCreate, ProfileUpdate
from hotelbook.services import follow_store, list_store, profile_store


async def test_create_and_get_profile(db):
    profile_id = new_id()
    created = await profile_store.create_profile(
        db, profile_id, ProfileCreate(username="jane", full_name="Jane Doe", home_city="Lisbon")
    )

    assert created.id == profile_id
    assert created.created_at is not None

    fetched = await profile_store.get_profile(db, profile_id)
    assert fetched == created
    assert fetched.bio is None


async def test_get_unknown_profile_returns_none(db):
    assert await profile_store.get_profile(db, new_id()) is None


async def test_duplicate_username_is_rejected(db, make_profile):
    await make_profile(username="taken")
    with pytest.raises(DuplicateKeyError):
        await make_profile(username="taken")


async def test_usernames_are_optional_and_may_repeat_as_null(make_profile):
    first = await make_profile(username=None)
    second = await make_profile(username=None)
    assert first.username is None and second.username is None


async def test_update_profile_changes_only_given_fields(db, make_profile):
    profile = await make_profile(username="jane", full_name="Jane Doe", bio="old", home_city="Paris")

    updated = await profile_store.update_profile(db, profile.id, ProfileUpdate(bio="x"))

    assert updated.bio == "x"
    assert updated.username == "jane"
    assert updated.full_name == "Jane Doe"
    assert updated.home_city == "Paris"
    assert updated.created_at == profile.created_at


async def test_update_profile_explicit_none_clears_field(db, make_profile):
    profile = await make_profile(home_city="Paris", bio="keep me")

    updated = await profile_store.update_profile(db, profile.id, ProfileUpdate(home_city=None))

    assert updated.home_city is None
    assert updated.bio == "keep me"


async def test_empty_update_is_a_no_op(db, make_profile):
    profile = await make_profile(bio="same")
    assert await profile_store.update_profile(db, profile.id, ProfileUpdate()) == profile


async def test_update_unknown_profile_raises(db):
    with pytest.raises(NotFoundError):
        await profile_store.update_profile(db, new_id(), ProfileUpdate(bio="x"))


async def test_update_to_taken_username_raises(db, make_profile):
    await make_profile(username="first")
    second = await make_profile(username="second")

    with pytest.raises(DuplicateKeyError):
        await profile_store.update_profile(db, second.id, ProfileUpdate(username="first"))

    assert (await profile_store.get_profile(db, second.id)).username == "second"


async def test_profile_stats_default_to_zero(db, make_profile):
    profile = await make_profile()

    stats = await profile_store.get_profile_with_stats(db, profile.id)

    assert stats.id == profile.id
    assert stats.username == profile.username
    assert (stats.review_count, stats.follower_count, stats.following_count, stats.saved_count) == (0, 0, 0, 0)


async def test_profile_stats_counts(db, make_profile, make_hotel, make_review):
    alice = await make_profile()
    bob = await make_profile()
    carol = await make_profile()
    h1 = await make_hotel()
    h2 = await make_hotel()

    await make_review(alice.id, h1.id)
    await make_review(bob.id, h1.id)
    await follow_store.follow_user(db, bob.id, alice.id)
    await follow_store.follow_user(db, carol.id, alice.id)
    await follow_store.follow_user(db, alice.id, bob.id)
    default = await list_store.get_or_create_default_list(db, alice.id)
    other = await list_store.create_list(db, alice.id, "Someday")
    await list_store.save_hotel_to_list(db, default.id, h1.id)
    await list_store.save_hotel_to_list(db, default.id, h2.id)
    await list_store.save_hotel_to_list(db, other.id, h1.id)

    stats = await profile_store.get_profile_with_stats(db, alice.id)

    assert stats.review_count == 1
    assert stats.follower_count == 2
    assert stats.following_count == 1
    # One row per list membership
    assert stats.saved_count == 3


async def test_profile_stats_unknown_profile(db):
    assert await profile_store.get_profile_with_stats(db, new_id()) is None
