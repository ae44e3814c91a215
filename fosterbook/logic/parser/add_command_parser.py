"""Parser for the ``add`` command."""

import logging
from typing import Optional, Sequence

from fosterbook.core.models import (NIL, MESSAGE_AVAILABILITY_REQUIRED,
                                    AnimalType, Availability, Name, Person)

from ..commands.add_command import AddCommand
from ..exceptions import ParseError
from ..messages import MESSAGE_INVALID_COMMAND_FORMAT
from . import parser_util
from .cli_syntax import (PREFIX_ADDRESS, PREFIX_ANIMAL_NAME,
                         PREFIX_ANIMAL_TYPE, PREFIX_AVAILABILITY, PREFIX_EMAIL,
                         PREFIX_NAME, PREFIX_PHONE, PREFIX_TAG)
from .rules import FieldRule, check_all, requires_when_any
from .tokenizer import ArgumentMultimap, ArgumentTokenizer

logger = logging.getLogger(__name__)

ALL_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_TAG,
    PREFIX_ANIMAL_NAME,
    PREFIX_AVAILABILITY,
    PREFIX_ANIMAL_TYPE,
)
REQUIRED_PREFIXES = (PREFIX_NAME, PREFIX_ADDRESS, PREFIX_PHONE, PREFIX_EMAIL)
SINGLE_VALUED_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)

ADD_COMMAND_RULES = (
    requires_when_any(
        triggers=(PREFIX_ANIMAL_NAME, PREFIX_ANIMAL_TYPE),
        required=PREFIX_AVAILABILITY,
        message=MESSAGE_AVAILABILITY_REQUIRED,
    ),
)


class AddCommandParser:
    """Parses ``add`` arguments into an AddCommand.

    Checks run fail-fast in a fixed order: required fields and empty
    preamble, cross-field rules, duplicate single-valued fields, then each
    field's own format.
    """

    def __init__(self, rules: Sequence[FieldRule] = ADD_COMMAND_RULES) -> None:
        self.rules = tuple(rules)

    def parse(self, args: str) -> AddCommand:
        """Parse ``args`` and return the command.

        Raises:
            ParseError: if the input does not conform to the expected format
        """
        arguments = ArgumentTokenizer.tokenize(args, *ALL_PREFIXES)

        if not _are_prefixes_present(arguments, *REQUIRED_PREFIXES) or (
            arguments.get_preamble()
        ):
            logger.debug("Rejected add arguments %r: missing fields or preamble", args)
            raise ParseError(
                MESSAGE_INVALID_COMMAND_FORMAT.format(AddCommand.MESSAGE_USAGE)
            )

        try:
            return AddCommand(self._build_person(arguments))
        except ParseError as e:
            logger.debug("Rejected add arguments %r: %s", args, e.message)
            raise

    def _build_person(self, arguments: ArgumentMultimap) -> Person:
        check_all(self.rules, arguments)

        arguments.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)
        name = parser_util.parse_name(arguments.get_value(PREFIX_NAME))
        phone = parser_util.parse_phone(arguments.get_value(PREFIX_PHONE))
        email = parser_util.parse_email(arguments.get_value(PREFIX_EMAIL))
        address = parser_util.parse_address(arguments.get_value(PREFIX_ADDRESS))
        tags = parser_util.parse_tags(arguments.get_all_values(PREFIX_TAG))

        animal_name: Optional[Name] = None
        if arguments.has(PREFIX_ANIMAL_NAME):
            animal_name = parser_util.parse_name(arguments.get_value(PREFIX_ANIMAL_NAME))

        availability: Optional[Availability] = None
        if arguments.has(PREFIX_AVAILABILITY):
            availability = parser_util.parse_availability(
                arguments.get_value(PREFIX_AVAILABILITY)
            )

        animal_type: Optional[AnimalType] = None
        if arguments.has(PREFIX_ANIMAL_TYPE):
            animal_type = parser_util.parse_animal_type(
                arguments.get_value(PREFIX_ANIMAL_TYPE),
                arguments.get_value(PREFIX_AVAILABILITY) or NIL,
            )

        return Person(
            name=name,
            phone=phone,
            email=email,
            address=address,
            tags=tags,
            animal_name=animal_name,
            availability=availability,
            animal_type=animal_type,
        )


def _are_prefixes_present(arguments: ArgumentMultimap, *prefixes) -> bool:
    return all(arguments.has(prefix) for prefix in prefixes)
