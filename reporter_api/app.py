"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from starlette.middleware.sessions import SessionMiddleware

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_exception_handlers, register_routes
from .core import (
    ALGOLIA_API_KEY,
    ALGOLIA_APPLICATION_ID,
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    SECRET_KEY,
    SESSION_COOKIE_NAME,
    SESSION_MAX_AGE,
    build_engine,
    init_db,
)
from .core.logging import get_logger, setup_logging
from .services.search import AlgoliaSearchClient

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(app.state.engine, reset=DB_RESET)
    logger.info("Database ready")
    yield


def create_app(
    *,
    engine: Optional[Engine] = None,
    search_client: Optional[AlgoliaSearchClient] = None,
) -> FastAPI:
    """Build the application around an engine and a search client.

    Both default to the ones described by the environment.
    """

    setup_logging(LOG_LEVEL)

    app = FastAPI(title="Reporter API", version="2.0.0", lifespan=lifespan)
    app.state.engine = engine if engine is not None else build_engine(DATABASE_URL)
    app.state.search_client = search_client or AlgoliaSearchClient(
        ALGOLIA_APPLICATION_ID, ALGOLIA_API_KEY
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=SECRET_KEY,
        session_cookie=SESSION_COOKIE_NAME,
        max_age=SESSION_MAX_AGE,
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
        domain=COOKIE_DOMAIN,
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("reporter_api.app:app", host="127.0.0.1", port=8080, reload=True)
