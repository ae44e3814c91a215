"""Command-line prefixes understood by the parsers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """Marker such as ``n/`` naming the field of the text after it."""

    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_ANIMAL_NAME = Prefix("an/")
PREFIX_AVAILABILITY = Prefix("av/")
PREFIX_ANIMAL_TYPE = Prefix("at/")
