"""Fosterbook - a contact book for animal fosterers."""

__version__ = "0.1.0"

# Core exports
from .core.models import *
