"""Main entry point for the FastAPI server."""

import uvicorn

from fosterbook.api import app
from fosterbook.config import Config

if __name__ == "__main__":
    Config.configure_logging()
    uvicorn.run(app, host=Config.get_api_host(), port=Config.get_api_port())
