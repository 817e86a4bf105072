"""FastAPI application."""

from fastapi import FastAPI

from .. import __version__
from ..config import get_settings
from .routes import action_router


def create_app() -> FastAPI:
    # Bad MENSAJE_* values fail here, at startup, not on the first request
    get_settings()

    app = FastAPI(title="Mensaje Action", version=__version__)
    app.include_router(action_router)
    return app


app = create_app()
