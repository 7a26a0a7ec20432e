"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "NBRH Dashboard"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Personal activity dashboard and session recommendations for NBRH players."
    AUTHORS: List[str] = ["NBRH"]

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    # DATABASE_URI takes precedence over the individual parts below.
    DATABASE_URI: Optional[str] = None
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "nbrh"

    # Dashboard
    DASHBOARD_DEFAULT_PAGE_SIZE: int = 10
    DASHBOARD_MAX_PAGE_SIZE: int = 100

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
