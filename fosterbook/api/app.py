"""FastAPI application."""

from fastapi import FastAPI

from fosterbook import __version__

from .routes import persons

app = FastAPI(
    title="Fosterbook API",
    description="Contact book for animal fosterers. Contacts are added with the same prefixed `add` command syntax used by the desktop client.",
    version=__version__,
)

app.include_router(persons.router)
