"""Shared helpers for the storage layer."""

from __future__ import annotations

from typing import Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel

from ..core.exceptions import StorageError, WriteError
from ..core.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


def save(
    session: Session,
    record: ModelT,
    *,
    context: str,
    on_conflict: Type[StorageError] = WriteError,
) -> ModelT:
    """Persist a single record in its own transaction and reload it.

    ``context`` names the calling operation in log lines. Constraint
    violations raise ``on_conflict``; any other database failure raises
    ``WriteError``.
    """

    session.add(record)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.error("%s.integrity_error: %s", context, exc)
        raise on_conflict() from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("%s.write_error: %s", context, exc)
        raise WriteError() from exc
    session.refresh(record)
    return record


__all__ = ["save"]
