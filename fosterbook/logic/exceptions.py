"""Exception hierarchy for command parsing and execution."""

from __future__ import annotations


class FosterbookError(Exception):
    """Base error carrying a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(FosterbookError):
    """User input does not conform to the expected command format."""


class DuplicatePrefixError(ParseError):
    """A single-valued field was given more than once."""

    def __init__(self, message: str, prefixes: tuple = ()) -> None:
        super().__init__(message)
        self.prefixes = prefixes


class DependencyError(ParseError):
    """A field was given without a field it depends on."""


class CommandError(FosterbookError):
    """A parsed command could not be executed."""
