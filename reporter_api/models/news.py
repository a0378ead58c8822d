"""Database models for published news content: authors, topics and posts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow

PUBLISHED_STATE = "published"
DRAFT_STATE = "draft"

ARTICLE_STYLE = "article"
REVIEW_STYLE = "review"
PHOTOGRAPHY_STYLE = "photography"
INTERACTIVE_STYLE = "interactive"

# Category slugs shown on the index page, in display order.
CATEGORIES = (
    "human_rights_and_society",
    "environment_and_education",
    "politics_and_economy",
    "culture_and_art",
    "international",
    "living_and_medical_care",
)


class Author(SQLModel, table=True):
    """Writer, photographer or designer credited on posts."""

    __tablename__ = "authors"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True)
    job_title: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    thumbnail: Optional[str] = None
    updated_at: datetime = ORMField(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )


class Topic(SQLModel, table=True):
    """Curated series grouping several posts."""

    __tablename__ = "topics"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    slug: str = ORMField(unique=True, index=True)
    title: str = ""
    short_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    leading_image: Optional[str] = None
    state: str = ORMField(default=DRAFT_STATE, index=True)
    published_date: Optional[datetime] = ORMField(default=None, index=True)
    updated_at: datetime = ORMField(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )


class Post(SQLModel, table=True):
    __tablename__ = "posts"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    slug: str = ORMField(unique=True, index=True)
    title: str = ""
    subtitle: Optional[str] = None
    style: str = ORMField(default=ARTICLE_STYLE, index=True)
    category: Optional[str] = ORMField(default=None, index=True)
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    hero_image: Optional[str] = None
    is_featured: bool = ORMField(default=False, index=True)
    topic_id: Optional[int] = ORMField(default=None, foreign_key="topics.id", index=True)
    state: str = ORMField(default=DRAFT_STATE, index=True)
    published_date: Optional[datetime] = ORMField(default=None, index=True)
    updated_at: datetime = ORMField(
        default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow}
    )


__all__ = [
    "ARTICLE_STYLE",
    "Author",
    "CATEGORIES",
    "DRAFT_STATE",
    "INTERACTIVE_STYLE",
    "PHOTOGRAPHY_STYLE",
    "PUBLISHED_STATE",
    "Post",
    "REVIEW_STYLE",
    "Topic",
]
