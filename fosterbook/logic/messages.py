"""User-facing messages shared across commands."""

from typing import Iterable

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): "
)


def get_error_message_for_duplicate_prefixes(prefixes: Iterable) -> str:
    """Message naming each duplicated prefix once, in the order given."""
    unique = dict.fromkeys(str(prefix) for prefix in prefixes)
    return MESSAGE_DUPLICATE_FIELDS + " ".join(unique)
