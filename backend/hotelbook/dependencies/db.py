"""Database session dependency for FastAPI routes."""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.database import Database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the app's Database. Stores commit their own work."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
