"""Models for Fosterbook."""

from .animal import NIL, AnimalType, Availability
from .base import Address, Email, FieldValue, Name, Phone, Tag
from .person import MESSAGE_AVAILABILITY_REQUIRED, Person

__all__ = [
    "NIL",
    "Address",
    "AnimalType",
    "Availability",
    "Email",
    "FieldValue",
    "MESSAGE_AVAILABILITY_REQUIRED",
    "Name",
    "Person",
    "Phone",
    "Tag",
]
