"""Application settings using Pydantic Settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Database Configuration
    mongodb_url: str = Field(
        "mongodb://localhost:27017/exercise_tracker",
        validation_alias=AliasChoices("mongo_uri", "mongo_local", "mongodb_url"),
    )
    mongodb_database: str = "exercise_tracker"

    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    # Landing page and static assets
    static_dir: str = "public"
    views_dir: str = "views"


# Global settings instance
settings = Settings()
