"""Database models for bookmarks and their owners."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Bookmark(SQLModel, table=True):
    """An article saved by one or more users, identified by slug and host."""

    __tablename__ = "bookmarks"
    __table_args__ = (UniqueConstraint("slug", "host", name="uq_bookmarks_slug_host"),)

    id: Optional[int] = ORMField(default=None, primary_key=True)
    slug: str = ORMField(index=True)
    host: str = ""
    title: str = ""
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    category: Optional[str] = None
    is_external: bool = False
    published_date: Optional[datetime] = None
    created_at: datetime = ORMField(default_factory=utcnow)


class UserBookmark(SQLModel, table=True):
    """Link row between a user and a saved bookmark.

    ``id`` grows with every save and orders links saved within the same
    timestamp tick.
    """

    __tablename__ = "users_bookmarks"
    __table_args__ = (
        UniqueConstraint("user_id", "bookmark_id", name="uq_users_bookmarks_user_bookmark"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(foreign_key="users.id", index=True)
    bookmark_id: int = ORMField(foreign_key="bookmarks.id", index=True)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Bookmark", "UserBookmark"]
