"""Abstract ContactDatabase class and its in-memory implementation."""

import logging
from abc import ABC, abstractmethod
from typing import List

from fosterbook.core.models import Person

logger = logging.getLogger(__name__)


class ContactDatabase(ABC):
    """Abstract base class for contact storage."""

    @abstractmethod
    async def put_person(self, person: Person) -> Person:
        pass

    @abstractmethod
    async def has_person(self, person: Person) -> bool:
        """True if a contact that is the same person is already stored."""
        pass

    @abstractmethod
    async def delete_person(self, person: Person) -> bool:
        pass

    @abstractmethod
    async def list_persons(self, limit: int = 100, offset: int = 0) -> List[Person]:
        pass


class InMemoryContactDatabase(ContactDatabase):
    """Keeps contacts in insertion order for the lifetime of the process."""

    def __init__(self) -> None:
        self._persons: List[Person] = []

    async def put_person(self, person: Person) -> Person:
        self._persons.append(person)
        logger.info("Stored contact %s (%d total)", person.name, len(self._persons))
        return person

    async def has_person(self, person: Person) -> bool:
        return any(stored.is_same_person(person) for stored in self._persons)

    async def delete_person(self, person: Person) -> bool:
        try:
            self._persons.remove(person)
        except ValueError:
            return False
        return True

    async def list_persons(self, limit: int = 100, offset: int = 0) -> List[Person]:
        return self._persons[offset : offset + limit]
