"""Database model for members."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow

# Privilege levels assigned to users.
PRIVILEGE_REGISTERED = 0
PRIVILEGE_MEMBER = 1
PRIVILEGE_ADMIN = 9


class User(SQLModel, table=True):
    """A member of the site; owns its linked accounts and bookmarks."""

    __tablename__ = "users"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    email: Optional[str] = ORMField(default=None, index=True)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    privilege: int = ORMField(default=PRIVILEGE_REGISTERED)
    registration_date: Optional[datetime] = None
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )


__all__ = ["PRIVILEGE_ADMIN", "PRIVILEGE_MEMBER", "PRIVILEGE_REGISTERED", "User"]
