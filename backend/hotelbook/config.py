"""Application configuration from environment variables."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "Hotelbook"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./hotelbook.db"
    seed_demo_data: bool = False

    # Lists / feed
    default_list_name: str = "Saved"
    feed_limit: int = 50

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "HOTELBOOK_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
