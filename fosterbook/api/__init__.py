"""HTTP API for Fosterbook."""

from .app import app

__all__ = ["app"]
