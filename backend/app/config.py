"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from typing import List


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Budget Tracker"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "sqlite:///./data/budget.sqlite"
    sql_echo: bool = False
    create_tables: bool = True  # Disable when the schema is managed by Alembic

    # Logging
    log_level: str = "INFO"

    # Server
    frontend_url: str = "http://localhost:3000"
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
