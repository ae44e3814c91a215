"""Base command contract."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fosterbook.database import ContactDatabase


@dataclass(frozen=True)
class CommandResult:
    """Feedback shown to the user after a command runs."""

    feedback: str


class Command(ABC):
    """A parsed command ready to run against the contact database."""

    @abstractmethod
    async def execute(self, database: ContactDatabase) -> CommandResult:
        pass
