"""Pytest configuration and fixtures for Fosterbook tests."""

import pytest

from fosterbook.core.models import (Address, AnimalType, Availability, Email,
                                    Name, Person, Phone, Tag)
from fosterbook.database import InMemoryContactDatabase


@pytest.fixture
def database():
    """Empty in-memory contact database."""
    return InMemoryContactDatabase()


@pytest.fixture
def amy():
    """Contact without fostering details."""
    return Person(
        name=Name(value="Amy Bee"),
        phone=Phone(value="11111111"),
        email=Email(value="amy@example.com"),
        address=Address(value="Block 312, Amy Street 1"),
        tags=frozenset({Tag(value="friend")}),
    )


@pytest.fixture
def bob():
    """Contact fostering a dog."""
    return Person(
        name=Name(value="Bob Choo"),
        phone=Phone(value="22222222"),
        email=Email(value="bob@example.com"),
        address=Address(value="Block 123, Bobby Street 3"),
        tags=frozenset({Tag(value="husband"), Tag(value="friend")}),
        animal_name=Name(value="Rex"),
        availability=Availability.NOT_AVAILABLE,
        animal_type=AnimalType(value="Dog"),
    )


@pytest.fixture
def amy_args():
    return " n/Amy Bee p/11111111 e/amy@example.com a/Block 312, Amy Street 1 t/friend"


@pytest.fixture
def bob_args():
    return (
        " n/Bob Choo p/22222222 e/bob@example.com a/Block 123, Bobby Street 3"
        " t/husband t/friend an/Rex av/NotAvailable at/Dog"
    )
