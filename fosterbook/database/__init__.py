"""Database package for Fosterbook."""

from .contact_database import ContactDatabase, InMemoryContactDatabase


def get_database() -> ContactDatabase:
    """Return the process-wide contact database."""
    from fosterbook.config import Config

    return Config.get_database()


__all__ = ["ContactDatabase", "InMemoryContactDatabase", "get_database"]
