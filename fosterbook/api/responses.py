"""API request and response models."""

from typing import List

from pydantic import BaseModel, Field

from fosterbook.core.models import Person


class CursorPage(BaseModel):
    model_config = {"extra": "forbid"}

    hasMore: bool
    offset: int = 0
    count: int


class AddPersonRequest(BaseModel):
    command: str = Field(
        ...,
        description="Arguments of the add command, e.g. `n/Jane Doe p/98765432 e/jane@example.com a/1 Main St`",
    )


class AddPersonResponse(BaseModel):
    person: Person
    feedback: str


class PersonListResponse(BaseModel):
    results: List[Person]
    page: CursorPage
