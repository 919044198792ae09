"""Load the demo catalog (hotels, tags, users, reviews, follows).

Creates the schema if needed and skips seeding when hotels already exist.

Usage:
    python -m scripts.seed_demo_data
    python -m scripts.seed_demo_data --database-url sqlite+aiosqlite:///./demo.db
"""

import argparse
import asyncio
import logging

from hotelbook.config import get_settings
from hotelbook.database import Database
from hotelbook.services.seed import seed_database

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


async def run(database_url: str) -> bool:
    database = Database(database_url)
    try:
        await database.initialize()
        async with database.session() as session:
            return await seed_database(session)
    finally:
        await database.dispose()


def main():
    parser = argparse.ArgumentParser(description="Seed the hotelbook database with demo data")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL (defaults to HOTELBOOK_DATABASE_URL / settings)",
    )
    args = parser.parse_args()

    database_url = args.database_url or get_settings().database_url
    seeded = asyncio.run(run(database_url))
    if seeded:
        logger.info(f"Seeded {database_url}")
    else:
        logger.info(f"{database_url} already has data, nothing to do")


if __name__ == "__main__":
    main()
