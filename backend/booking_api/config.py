"""Application configuration using pydantic-settings."""

from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Booking Records API"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Storage
    storage_backend: Literal["mongo", "memory"] = "mongo"
    mongodb_connection_string: str = "mongodb://localhost:27017"
    mongodb_database_name: str = "BookingDB"
    mongodb_collection_name: str = "Bookings"

    # Demo data
    generate_default_count: int = 50

    # Frontend
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5000",
    ]

    @model_validator(mode="after")
    def _reject_memory_store_in_production(self) -> "Settings":
        """The in-memory store loses every record on restart; refuse it in production."""
        if self.storage_backend == "memory" and self.environment == "production":
            raise ValueError(
                "STORAGE_BACKEND=memory is only allowed outside production. "
                "Set MONGODB_CONNECTION_STRING and STORAGE_BACKEND=mongo."
            )
        return self


settings = Settings()
