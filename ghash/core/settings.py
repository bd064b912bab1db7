from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GHASH_",
        case_sensitive=False,
    )

    # Defaults applied by the HTTP layer when a query omits them.
    default_depth: int = 50
    default_precision: int = 6

    # Upper bounds on per-request work outside the range cell cap.
    max_depth: int = 60
    max_hash_length: int = 24

    # Ranges are combinatorial; refuse to enumerate past this many cells.
    range_max_cells: int = 100_000

    log_level: str = "INFO"

    # Map front-ends call the API straight from the browser.
    cors_allow_origin: str = "*"


@lru_cache
def get_settings() -> Settings:
    return Settings()
