"""Cross-field rules checked on tokenized arguments before field parsing."""

from dataclasses import dataclass
from typing import Callable, Iterable

from ..exceptions import DependencyError
from .cli_syntax import Prefix
from .tokenizer import ArgumentMultimap


@dataclass(frozen=True)
class FieldRule:
    """A predicate over the arguments and the message used when it fails."""

    predicate: Callable[[ArgumentMultimap], bool]
    message: str

    def check(self, arguments: ArgumentMultimap) -> None:
        if not self.predicate(arguments):
            raise DependencyError(self.message)


def requires_when_any(
    triggers: Iterable[Prefix], required: Prefix, message: str
) -> FieldRule:
    """Rule: if any of ``triggers`` has a value, ``required`` must have one too."""
    triggers = tuple(triggers)

    def predicate(arguments: ArgumentMultimap) -> bool:
        if any(arguments.has(prefix) for prefix in triggers):
            return arguments.has(required)
        return True

    return FieldRule(predicate=predicate, message=message)


def check_all(rules: Iterable[FieldRule], arguments: ArgumentMultimap) -> None:
    for rule in rules:
        rule.check(arguments)
