"""Converters from raw argument text to contact field values.

Every function strips surrounding whitespace first and raises
``ParseError`` carrying the field's constraint message when the text is
malformed.
"""

from typing import FrozenSet, Iterable

from fosterbook.core.models import (Address, AnimalType, Availability, Email,
                                    Name, Phone, Tag)
from fosterbook.core.models.animal import AVAILABILITY_CONSTRAINTS

from ..exceptions import ParseError


def _parse_field(raw: str, model):
    trimmed = raw.strip()
    if not model.is_valid(trimmed):
        raise ParseError(model.MESSAGE_CONSTRAINTS)
    return model(value=trimmed)


def parse_name(name: str) -> Name:
    return _parse_field(name, Name)


def parse_phone(phone: str) -> Phone:
    return _parse_field(phone, Phone)


def parse_email(email: str) -> Email:
    return _parse_field(email, Email)


def parse_address(address: str) -> Address:
    return _parse_field(address, Address)


def parse_tag(tag: str) -> Tag:
    return _parse_field(tag, Tag)


def parse_tags(tags: Iterable[str]) -> FrozenSet[Tag]:
    """Parse every tag; repeated tags collapse into one."""
    return frozenset(parse_tag(tag) for tag in tags)


def parse_availability(availability: str) -> Availability:
    parsed = Availability.from_text(availability.strip())
    if parsed is None:
        raise ParseError(AVAILABILITY_CONSTRAINTS)
    return parsed


def parse_animal_type(animal_type: str, availability: str) -> AnimalType:
    """Parse an animal type checked against the contact's availability.

    Args:
        animal_type: Raw animal type text
        availability: Raw availability text, or ``"nil"`` when none was given

    Returns:
        The validated AnimalType
    """
    trimmed = animal_type.strip()
    violation = AnimalType.constraint_violation(trimmed, availability.strip())
    if violation is not None:
        raise ParseError(violation)
    return AnimalType(value=trimmed)
