"""Database model for OAuth-backed accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow

GOOGLE_OAUTH = "google"
FACEBOOK_OAUTH = "facebook"


class OAuthAccount(SQLModel, table=True):
    """Identity linked from an external OAuth provider.

    ``(type, a_id)`` is indexed but not unique; lookups pick the newest row.
    """

    __tablename__ = "o_auth_accounts"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: Optional[int] = ORMField(default=None, foreign_key="users.id", index=True)
    type: str = ORMField(index=True)
    a_id: Optional[str] = ORMField(default=None, index=True)
    email: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    picture: Optional[str] = None
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: datetime = ORMField(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )


__all__ = ["FACEBOOK_OAUTH", "GOOGLE_OAUTH", "OAuthAccount"]
