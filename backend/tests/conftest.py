"""Shared fixtures: a fresh SQLite file per test, sessions and row factories."""

from datetime import datetime, timedelta

import httpx
import pytest
from sqlalchemy import update

from hotelbook.config import Settings
from hotelbook.database import Database
from hotelbook.ids import new_id
from hotelbook.main import create_app
from hotelbook.schemas.hotel import HotelCreate
from hotelbook.schemas.profile import ProfileCreate
from hotelbook.schemas.review import ReviewCreate
from hotelbook.services import hotel_store, profile_store, review_store

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'hotelbook-test.db'}"


@pytest.fixture
async def database(database_url):
    database = Database(database_url)
    await database.initialize()
    yield database
    await database.dispose()


@pytest.fixture
async def db(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def make_profile(db):
    counter = iter(range(1, 10_000))

    async def _make(**fields):
        n = next(counter)
        fields.setdefault("username", f"user{n}")
        fields.setdefault("full_name", f"User {n}")
        return await profile_store.create_profile(db, new_id(), ProfileCreate(**fields))

    return _make


@pytest.fixture
def make_hotel(db):
    counter = iter(range(1, 10_000))

    async def _make(**fields):
        fields.setdefault("name", f"Hotel {next(counter):04d}")
        return await hotel_store.create_hotel(db, HotelCreate(**fields))

    return _make


@pytest.fixture
def make_review(db):
    async def _make(user_id: str, hotel_id: str, rating_overall: int = 4, **fields):
        return await review_store.create_review(
            db,
            ReviewCreate(user_id=user_id, hotel_id=hotel_id, rating_overall=rating_overall, **fields),
        )

    return _make


@pytest.fixture
def set_created_at(db):
    """Pin ``created_at`` on a row, ``minutes`` after a fixed base time."""

    async def _set(model, row_id: str, minutes: int):
        await db.execute(
            update(model).where(model.id == row_id).values(created_at=BASE_TIME + timedelta(minutes=minutes))
        )
        await db.commit()

    return _set


@pytest.fixture
async def client(database, database_url):
    app = create_app(Settings(database_url=database_url))
    # ASGITransport does not run the lifespan; share the test database instead
    app.state.database = database
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
