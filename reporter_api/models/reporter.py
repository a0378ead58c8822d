"""Database model for local (email based) accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ReporterAccount(SQLModel, table=True):
    """Credentials for direct sign-up; at most one per user."""

    __tablename__ = "reporter_accounts"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: Optional[int] = ORMField(default=None, foreign_key="users.id", unique=True)
    account: str = ORMField(index=True)
    password: str = ""
    active: bool = False
    activate_token: Optional[str] = None
    activate_expires_at: Optional[datetime] = None
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )


__all__ = ["ReporterAccount"]
