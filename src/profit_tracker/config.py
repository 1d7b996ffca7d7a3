"""Profit tracker service configuration."""

import os
from functools import lru_cache
from typing import Annotated, Any, Literal

from dotenv import load_dotenv
from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_env_file() -> str:
    """
    Determine the .env file to use.
    It is chosen from the ENVIRONMENT value, development by default.
    """
    env_file = {
        "production": ".env",
        "development": ".env.dev",
    }
    load_dotenv(env_file.get(os.getenv("ENVIRONMENT", "development")), override=True)
    return env_file.get(os.getenv("ENVIRONMENT", "development"), ".env.dev")


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    """Service config settings."""

    model_config = SettingsConfigDict(
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,  # Ensures exact variable name matching
        env_ignore_empty=True,
        extra="ignore",
    )
    ENVIRONMENT: Literal["development", "production"] = "development"
    PROJECT_NAME: str = "Rideshare Profit Tracker"

    # API settings
    DOMAIN: str = "0.0.0.0"
    DEBUG_MODE: bool = False
    CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.CORS_ORIGINS]

    # Storage settings
    STORAGE_BACKEND: Literal["memory", "redis"] = "memory"
    STORAGE_KEY_PREFIX: str = "taxi-profit-tracker"
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))

    # Aggregation settings
    TIMEZONE: str = os.getenv("TIMEZONE", "Europe/Warsaw")
    ESTIMATED_DAILY_DISTANCE_KM: float = 300.0
    MONTHLY_RENTAL_DIVISOR_DAYS: int = 30
    TREND_WINDOW_DAYS: int = 7


# Global settings instance with caching.
@lru_cache()
def get_settings() -> Settings:
    settings = Settings()

    return settings
