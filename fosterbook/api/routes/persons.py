"""Person endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from fosterbook.api.responses import (AddPersonRequest, AddPersonResponse,
                                      CursorPage, PersonListResponse)
from fosterbook.database import ContactDatabase
from fosterbook.database import get_database as get_db
from fosterbook.logic.exceptions import CommandError, ParseError
from fosterbook.logic.parser.add_command_parser import AddCommandParser

router = APIRouter(tags=["Persons"])


def get_database() -> ContactDatabase:
    """Get database instance."""
    return get_db()


@router.post("/persons", response_model=AddPersonResponse, status_code=201)
async def add_person(
    request: AddPersonRequest,
    db: ContactDatabase = Depends(get_database),
):
    """Parse `add` command arguments and store the resulting person."""
    try:
        command = AddCommandParser().parse(request.command)
    except ParseError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        result = await command.execute(db)
    except CommandError as e:
        raise HTTPException(status_code=409, detail=e.message)

    return AddPersonResponse(person=command.person, feedback=result.feedback)


@router.get("/persons", response_model=PersonListResponse)
async def list_persons(
    limit: int = Query(20, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0, description="Offset (Number of items to skip)"),
    db: ContactDatabase = Depends(get_database),
):
    """List stored persons."""
    persons = await db.list_persons(limit=limit, offset=offset)
    return PersonListResponse(
        results=persons,
        page=CursorPage(hasMore=len(persons) == limit, offset=offset, count=len(persons)),
    )
