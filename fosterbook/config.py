"""Configuration for Fosterbook."""

import logging
import os
from typing import Optional

from fosterbook.database.contact_database import (ContactDatabase,
                                                  InMemoryContactDatabase)


class Config:
    """Configuration class for Fosterbook."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_API_HOST = "0.0.0.0"
    DEFAULT_API_PORT = 8000

    # Shared contact database, created on first use
    _database: Optional[ContactDatabase] = None

    @classmethod
    def get_log_level(cls) -> str:
        """Get the logging level name.

        Returns:
            Level name from FOSTERBOOK_LOG_LEVEL, or the default
        """
        return os.getenv("FOSTERBOOK_LOG_LEVEL", cls.DEFAULT_LOG_LEVEL).upper()

    @classmethod
    def get_api_host(cls) -> str:
        return os.getenv("FOSTERBOOK_API_HOST", cls.DEFAULT_API_HOST)

    @classmethod
    def get_api_port(cls) -> int:
        return int(os.getenv("FOSTERBOOK_API_PORT", cls.DEFAULT_API_PORT))

    @classmethod
    def configure_logging(cls) -> None:
        logging.basicConfig(
            level=cls.get_log_level(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    @classmethod
    def get_database(cls) -> ContactDatabase:
        """Get the shared contact database, creating it if necessary.

        Returns:
            The ContactDatabase used by the API
        """
        if cls._database is None:
            cls._database = InMemoryContactDatabase()
        return cls._database
