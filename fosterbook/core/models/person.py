"""Person model using Pydantic."""

from typing import FrozenSet, Optional

from pydantic import BaseModel, Field, model_validator

from .animal import AnimalType, Availability
from .base import Address, Email, Name, Phone, Tag

MESSAGE_AVAILABILITY_REQUIRED = (
    "Availability is required when providing animalName or animalType."
)


class Person(BaseModel):
    """A contact in the address book.

    The fostering fields are optional, but an animal name or animal type is
    only meaningful together with an availability.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: Name = Field(..., description="Contact's name")
    phone: Phone = Field(..., description="Contact's phone number")
    email: Email = Field(..., description="Contact's email address")
    address: Address = Field(..., description="Contact's postal address")
    tags: FrozenSet[Tag] = Field(
        default_factory=frozenset, description="Labels attached to the contact"
    )
    animal_name: Optional[Name] = Field(
        None, description="Name of the animal the contact is fostering"
    )
    availability: Optional[Availability] = Field(
        None, description="Whether the contact can foster an animal"
    )
    animal_type: Optional[AnimalType] = Field(
        None, description="Kind of animal fostered or accepted"
    )

    @model_validator(mode="after")
    def validate_fostering_fields(self):
        if (self.animal_name is not None or self.animal_type is not None) and (
            self.availability is None
        ):
            raise ValueError(MESSAGE_AVAILABILITY_REQUIRED)
        return self

    def is_same_person(self, other: Optional["Person"]) -> bool:
        """Two contacts are the same person when their names match."""
        if other is self:
            return True
        return other is not None and other.name == self.name

    def __str__(self) -> str:
        parts = [
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}"
        ]
        if self.animal_name is not None:
            parts.append(f"; Animal Name: {self.animal_name}")
        if self.availability is not None:
            parts.append(f"; Availability: {self.availability}")
        if self.animal_type is not None:
            parts.append(f"; Animal Type: {self.animal_type}")
        if self.tags:
            parts.append("; Tags: " + "".join(sorted(str(tag) for tag in self.tags)))
        return "".join(parts)
