"""The ``add`` command."""

import logging

from fosterbook.core.models import Person
from fosterbook.database import ContactDatabase

from ..exceptions import CommandError
from ..parser.cli_syntax import (PREFIX_ADDRESS, PREFIX_ANIMAL_NAME,
                                 PREFIX_ANIMAL_TYPE, PREFIX_AVAILABILITY,
                                 PREFIX_EMAIL, PREFIX_NAME, PREFIX_PHONE,
                                 PREFIX_TAG)
from .base import Command, CommandResult

logger = logging.getLogger(__name__)


class AddCommand(Command):
    """Adds a person to the address book."""

    COMMAND_WORD = "add"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a person to the address book. "
        "Parameters: "
        f"{PREFIX_NAME}NAME "
        f"{PREFIX_PHONE}PHONE "
        f"{PREFIX_EMAIL}EMAIL "
        f"{PREFIX_ADDRESS}ADDRESS "
        f"[{PREFIX_TAG}TAG]... "
        f"[{PREFIX_ANIMAL_NAME}ANIMAL_NAME] "
        f"[{PREFIX_AVAILABILITY}AVAILABILITY] "
        f"[{PREFIX_ANIMAL_TYPE}ANIMAL_TYPE]\n"
        f"Example: {COMMAND_WORD} "
        f"{PREFIX_NAME}John Doe "
        f"{PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com "
        f"{PREFIX_ADDRESS}311, Clementi Ave 2, #02-25 "
        f"{PREFIX_TAG}friends "
        f"{PREFIX_TAG}owesMoney "
        f"{PREFIX_ANIMAL_NAME}Rex "
        f"{PREFIX_AVAILABILITY}Available "
        f"{PREFIX_ANIMAL_TYPE}Dog"
    )

    MESSAGE_SUCCESS = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"

    def __init__(self, person: Person) -> None:
        self.person = person

    async def execute(self, database: ContactDatabase) -> CommandResult:
        if await database.has_person(self.person):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)

        await database.put_person(self.person)
        logger.info("Added person %s", self.person.name)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(self.person))

    def __eq__(self, other) -> bool:
        if not isinstance(other, AddCommand):
            return NotImplemented
        return self.person == other.person

    def __hash__(self) -> int:
        return hash(self.person)

    def __repr__(self) -> str:
        return f"AddCommand(person={self.person!r})"
