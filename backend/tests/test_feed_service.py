from hotelbook.models import Review
from hotelbook.services import feed_service, follow_store, review_store


async def test_feed_is_empty_when_following_nobody(db, make_profile, monkeypatch):
    user = await make_profile()

    async def fail(*args, **kwargs):
        raise AssertionError("review query should not run")

    monkeypatch.setattr(review_store, "get_reviews_by_authors", fail)

    assert await feed_service.get_feed(db, user.id) == []


async def test_feed_is_capped_and_newest_first(db, make_profile, make_hotel, make_review, set_created_at):
    viewer = await make_profile()
    friend_a = await make_profile()
    friend_b = await make_profile()
    await follow_store.follow_user(db, viewer.id, friend_a.id)
    await follow_store.follow_user(db, viewer.id, friend_b.id)

    review_ids = []
    for i in range(60):
        hotel = await make_hotel()
        author = friend_a if i % 2 else friend_b
        review = await make_review(author.id, hotel.id)
        await set_created_at(Review, review.id, i)
        review_ids.append(review.id)

    feed = await feed_service.get_feed(db, viewer.id)

    assert len(feed) == 50
    assert [item.review.id for item in feed] == list(reversed(review_ids))[:50]
    times = [item.review.created_at for item in feed]
    assert times == sorted(times, reverse=True)


async def test_feed_only_contains_followees(db, make_profile, make_hotel, make_review):
    viewer = await make_profile()
    friend = await make_profile(username="friend", full_name="Friend", avatar_url="https://a/f.png")
    stranger = await make_profile()
    hotel = await make_hotel()
    await follow_store.follow_user(db, viewer.id, friend.id)

    friend_review = await make_review(friend.id, hotel.id, photo_urls=["https://img/1.jpg"])
    await make_review(stranger.id, hotel.id)
    await make_review(viewer.id, hotel.id)

    feed = await feed_service.get_feed(db, viewer.id)

    assert [item.review.id for item in feed] == [friend_review.id]
    item = feed[0]
    assert item.friend.model_dump() == {
        "id": friend.id,
        "username": "friend",
        "full_name": "Friend",
        "avatar_url": "https://a/f.png",
    }
    assert item.friend == item.review.user
    assert item.review.hotel.id == hotel.id
    assert [p.url for p in item.review.photos] == ["https://img/1.jpg"]


async def test_feed_respects_explicit_limit(db, make_profile, make_hotel, make_review):
    viewer = await make_profile()
    friend = await make_profile()
    await follow_store.follow_user(db, viewer.id, friend.id)
    for _ in range(3):
        await make_review(friend.id, (await make_hotel()).id)

    assert len(await feed_service.get_feed(db, viewer.id, limit=2)) == 2


async def test_unfollowing_empties_the_feed(db, make_profile, make_hotel, make_review):
    viewer = await make_profile()
    friend = await make_profile()
    await follow_store.follow_user(db, viewer.id, friend.id)
    await make_review(friend.id, (await make_hotel()).id)
    assert len(await feed_service.get_feed(db, viewer.id)) == 1

    await follow_store.unfollow_user(db, viewer.id, friend.id)

    assert await feed_service.get_feed(db, viewer.id) == []
