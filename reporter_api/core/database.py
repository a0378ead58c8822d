"""Database engine construction and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, SQLModel, create_engine


def build_engine(database_url: str) -> Engine:
    """Create the connection pool for ``database_url``.

    SQLite files get their parent directory created and cross-thread access
    enabled, since FastAPI runs sync handlers in a thread pool.
    """

    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, connect_args=connect_args)


def init_db(engine: Engine, *, reset: bool = False) -> None:
    """Create all tables, optionally dropping them first."""

    if reset:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a session bound to the app's engine."""

    with Session(request.app.state.engine) as session:
        yield session


__all__ = ["build_engine", "get_session", "init_db"]
