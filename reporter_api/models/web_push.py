"""Database model for browser push subscriptions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class WebPushSubscription(SQLModel, table=True):
    """Push endpoint registered by a browser."""

    __tablename__ = "web_push_subs"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    endpoint: str = ORMField(unique=True)
    crc32_endpoint: int = ORMField(default=0, index=True, sa_type=BigInteger)
    keys: str = ""
    expiration_time: Optional[datetime] = None
    user_id: Optional[int] = ORMField(default=None, foreign_key="users.id")
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["WebPushSubscription"]
