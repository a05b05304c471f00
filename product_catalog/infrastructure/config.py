"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://catalog:catalog_dev_password@db:5432/product_catalog"

    # Create missing tables on startup
    create_tables_on_startup: bool = True

    # Seed the catalog on first boot when no categories exist
    seed_on_startup: bool = True

    # CORS
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"


settings = Settings()
