"""Contact field value types using Pydantic."""

import re
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator


class FieldValue(BaseModel):
    """A single validated contact field.

    Subclasses set ``VALIDATION_REGEX`` and ``MESSAGE_CONSTRAINTS``; the
    stored ``value`` always matches the regex.
    """

    model_config = {"extra": "forbid", "frozen": True}

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    VALIDATION_REGEX: ClassVar[str] = ""

    value: str = Field(..., description="The validated field text")

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return re.fullmatch(cls.VALIDATION_REGEX, test) is not None

    @field_validator("value")
    @classmethod
    def validate_value(cls, v):
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return self.value


class Name(FieldValue):
    """Name of a contact or of a fostered animal."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[a-zA-Z0-9][a-zA-Z0-9 ]*"


class Phone(FieldValue):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[0-9]{3,}"


_SPECIAL_CHARACTERS = "+_.-"
_ALPHANUMERIC = r"[a-zA-Z0-9]+"
_LOCAL_PART = rf"{_ALPHANUMERIC}(?:[{re.escape(_SPECIAL_CHARACTERS)}]{_ALPHANUMERIC})*"
_DOMAIN_PART = rf"{_ALPHANUMERIC}(?:-{_ALPHANUMERIC})*"
_DOMAIN_LAST_PART = rf"(?=[a-zA-Z0-9-]{{2,}}$){_DOMAIN_PART}"


class Email(FieldValue):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        f"1. The local-part should only contain alphanumeric characters and "
        f"these special characters, excluding the parentheses, ({_SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up "
        "of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only "
        "by hyphens, if any."
    )
    VALIDATION_REGEX: ClassVar[str] = (
        rf"{_LOCAL_PART}@(?:{_DOMAIN_PART}\.)*{_DOMAIN_LAST_PART}"
    )


class Address(FieldValue):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Addresses can take any values, and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[^\s].*"


class Tag(FieldValue):
    """Free-form label attached to a contact."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    VALIDATION_REGEX: ClassVar[str] = r"[a-zA-Z0-9]+"

    def __str__(self) -> str:
        return f"[{self.value}]"
