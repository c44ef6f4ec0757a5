"""
Application configuration and logging setup.

Settings are read from the environment (or a local .env file).
"""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """BioTrack configuration settings."""

    api_title: str = "BioTrack API"
    database_url: str = "sqlite:///./biotrack.db"
    sql_echo: bool = False
    create_tables_on_startup: bool = True
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    bcrypt_rounds: int = 12

    class Config:
        env_file = ".env"
        env_prefix = "BIOTRACK_"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from settings."""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=settings.log_format)
    logging.getLogger("biotrack").setLevel(log_level)
