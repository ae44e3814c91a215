"""Fostering-related models: availability and animal type."""

import re
from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, Field, field_validator

NIL = "nil"

AVAILABILITY_CONSTRAINTS = "Availability should be one of: Available, NotAvailable, nil"


class Availability(str, Enum):
    """Whether a contact can take in an animal."""

    AVAILABLE = "Available"
    NOT_AVAILABLE = "NotAvailable"
    NIL = NIL

    @classmethod
    def from_text(cls, text: str) -> Optional["Availability"]:
        """Case-insensitive lookup; returns None for unknown text."""
        lowered = text.lower()
        for member in cls:
            if member.value.lower() == lowered:
                return member
        return None

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.from_text(test) is not None

    def __str__(self) -> str:
        return self.value


class AnimalType(BaseModel):
    """Kind of animal a contact is fostering or can foster.

    An animal type is a single alphabetic word. Validation also receives the
    contact's availability text (``nil`` when none was given) so rules that
    depend on it live here rather than in the parser.
    """

    model_config = {"extra": "forbid", "frozen": True}

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Animal type should be a single word made of letters only"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[a-zA-Z]+"

    value: str = Field(..., description="Animal type, e.g. Dog or Cat")

    @classmethod
    def is_valid_format(cls, test: str) -> bool:
        return re.fullmatch(cls.VALIDATION_REGEX, test) is not None

    @classmethod
    def is_valid(cls, test: str, availability: str) -> bool:
        return cls.constraint_violation(test, availability) is None

    @classmethod
    def constraint_violation(cls, test: str, availability: str) -> Optional[str]:
        """Return the message for the first rule ``test`` breaks, if any."""
        if not cls.is_valid_format(test):
            return cls.MESSAGE_CONSTRAINTS
        return None

    @field_validator("value")
    @classmethod
    def validate_value(cls, v):
        if not cls.is_valid_format(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return self.value
