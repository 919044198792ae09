from sqlalchemy import select

from hotelbook.ids import new_id
from hotelbook.models import Event
from hotelbook.services import event_service, profile_store


async def test_track_event_records_row(db, make_profile):
    user = await make_profile()

    ok = await event_service.track_event(db, user.id, "hotel_viewed", {"hotel_id": "abc"})

    assert ok is True
    event = (await db.execute(select(Event))).scalar_one()
    assert event.event_name == "hotel_viewed"
    assert event.payload == {"hotel_id": "abc"}
    assert event.user_id == user.id


async def test_anonymous_event(db):
    assert await event_service.track_event(db, None, "app_opened") is True


async def test_track_event_failure_is_swallowed(db, make_profile):
    user = await make_profile()

    ok = await event_service.track_event(db, new_id(), "hotel_viewed", {})

    assert ok is False
    # The session remains usable
    assert (await profile_store.get_profile(db, user.id)).id == user.id
