from sqlalchemy import func, select

from hotelbook.models import Hotel, HotelTag, Profile
from hotelbook.schemas.hotel import HotelFilters
from hotelbook.services import feed_service, hotel_store, profile_store
from hotelbook.services.seed import HOTELS, TAGS, seed_database

from scripts.seed_demo_data import run


async def _hotel_count(db):
    return (await db.execute(select(func.count(Hotel.id)))).scalar()


async def test_seed_loads_catalog_once(db):
    assert await seed_database(db) is True
    assert await seed_database(db) is False

    assert await _hotel_count(db) == len(HOTELS)
    assert (await db.execute(select(func.count(HotelTag.id)))).scalar() == len(TAGS)


async def test_seed_skips_when_hotels_exist(db, make_hotel):
    await make_hotel(name="Already here")

    assert await seed_database(db) is False
    assert await _hotel_count(db) == 1


async def test_seeded_data_is_queryable(db):
    await seed_database(db)

    jane = (await db.execute(select(Profile).where(Profile.username == "traveljane"))).scalar_one()

    stats = await profile_store.get_profile_with_stats(db, jane.id)
    assert stats.review_count == 2
    assert stats.following_count == 2
    assert stats.follower_count == 1

    feed = await feed_service.get_feed(db, jane.id)
    assert {item.friend.username for item in feed} == {"marcowanders", "sarahexplores"}
    assert len(feed) == 3

    paris = await hotel_store.get_hotels(db, HotelFilters(query="paris"))
    assert [h.name for h in paris] == ["The Hoxton, Paris", "The Ritz Paris"]
    assert paris[1].avg_rating == 5.0
    assert {t.name for t in paris[1].tags} == {"Luxury", "Heritage"}


async def test_seed_script_run(database_url):
    assert await run(database_url) is True
    assert await run(database_url) is False
