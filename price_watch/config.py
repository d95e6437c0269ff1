"""Configuration management for the Price Watch server.

This module handles configuration loading from environment variables,
providing sensible defaults for development and production.
"""

import logging
import os
from pathlib import Path

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application configuration settings.

    Attributes:
        app_name: Application name
        version: Application version
        debug: Debug mode flag
        database_path: Location of the SQLite database file
        cors_origins: List of allowed CORS origins
        host: Server host address
        port: Server port number
        user_header: Header carrying the authenticated user id when the
            server runs behind a trusted identity proxy
    """

    app_name: str = "Price Watch API"
    version: str = "1.0.0"
    debug: bool = False

    # Database configuration
    database_path: str = "~/.price_watch/price_watch.db"

    # CORS configuration - allow local development origins
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:4321",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:4321",
        "http://127.0.0.1:5173",
    ]

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # Authentication
    user_header: str = "X-Authenticated-User"

    class Config:
        """Pydantic configuration."""
        env_prefix = "PRICE_WATCH_"
        case_sensitive = False

    @property
    def database_url(self) -> str:
        """Get SQLAlchemy database URL.

        Returns:
            Database URL string for SQLAlchemy
        """
        expanded_path = os.path.expanduser(self.database_path)
        return f"sqlite:///{expanded_path}"

    def get_database_path(self) -> Path:
        """Get expanded database path as Path object.

        Returns:
            Resolved database file path
        """
        return Path(os.path.expanduser(self.database_path))


# Global settings instance
settings = Settings()
