"""Read-only storage for published authors, topics and posts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type

from sqlmodel import Session, SQLModel, func, select

from ..core.exceptions import InvalidInputError, NotFoundError
from ..models import (
    CATEGORIES,
    INTERACTIVE_STYLE,
    PHOTOGRAPHY_STYLE,
    PUBLISHED_STATE,
    REVIEW_STYLE,
    Author,
    Post,
    Topic,
)

AUTHOR_SORT_FIELDS = ("updated_at", "name")
POST_SORT_FIELDS = ("published_date", "updated_at", "title")
TOPIC_SORT_FIELDS = ("published_date", "updated_at", "title")

# Section name -> number of records on the index page.
INDEX_PAGE_SECTIONS = {
    "latest": 6,
    "editor_picks": 6,
    "latest_topic": 1,
    "reviews": 4,
    "topics": 4,
    "photos": 6,
    "infographics": 10,
}
CATEGORY_POSTS_LIMIT = 4


@dataclass
class PostFilter:
    """Optional conditions for post listings; ``None`` means no condition."""

    category: Optional[str] = None
    style: Optional[str] = None
    topic_id: Optional[int] = None
    is_featured: Optional[bool] = None

    def clauses(self) -> List[Any]:
        clauses: List[Any] = [Post.state == PUBLISHED_STATE]
        if self.category is not None:
            clauses.append(Post.category == self.category)
        if self.style is not None:
            clauses.append(Post.style == self.style)
        if self.topic_id is not None:
            clauses.append(Post.topic_id == self.topic_id)
        if self.is_featured is not None:
            clauses.append(Post.is_featured == self.is_featured)
        return clauses


def order_by(model: Type[SQLModel], sort: str, allowed: Iterable[str]):
    """Translate ``"field"`` / ``"-field"`` into an ORDER BY clause."""

    field = sort.lstrip("-")
    if field not in allowed:
        raise InvalidInputError(f"Cannot sort by {field}")
    column = getattr(model, field)
    return column.desc() if sort.startswith("-") else column.asc()


class NewsStorage:
    def __init__(self, session: Session):
        self.session = session

    def _page(self, model, clauses, sort_clause, limit: int, offset: int):
        total = self.session.exec(
            select(func.count()).select_from(model).where(*clauses)
        ).one()
        records = self.session.exec(
            select(model)
            .where(*clauses)
            .order_by(sort_clause, model.id.desc())
            .offset(offset)
            .limit(limit)
        ).all()
        return list(records), int(total)

    def get_authors(
        self, limit: int, offset: int, sort: str = "-updated_at"
    ) -> Tuple[List[Author], int]:
        return self._page(
            Author, [], order_by(Author, sort, AUTHOR_SORT_FIELDS), limit, offset
        )

    def get_posts(
        self,
        limit: int,
        offset: int,
        sort: str = "-published_date",
        post_filter: Optional[PostFilter] = None,
    ) -> Tuple[List[Post], int]:
        """Return one page of published posts and the matching total."""

        clauses = (post_filter or PostFilter()).clauses()
        return self._page(
            Post, clauses, order_by(Post, sort, POST_SORT_FIELDS), limit, offset
        )

    def get_a_post(self, slug: str) -> Post:
        post = self.session.exec(
            select(Post).where(Post.slug == slug, Post.state == PUBLISHED_STATE)
        ).first()
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def get_topics(
        self, limit: int, offset: int, sort: str = "-published_date"
    ) -> Tuple[List[Topic], int]:
        return self._page(
            Topic,
            [Topic.state == PUBLISHED_STATE],
            order_by(Topic, sort, TOPIC_SORT_FIELDS),
            limit,
            offset,
        )

    def get_a_topic(self, slug: str) -> Topic:
        topic = self.session.exec(
            select(Topic).where(Topic.slug == slug, Topic.state == PUBLISHED_STATE)
        ).first()
        if topic is None:
            raise NotFoundError("Topic not found")
        return topic

    def get_index_page_contents(self) -> Dict[str, List[Any]]:
        """Collect the sections shown on the front page, newest first."""

        def latest(limit: int, **conditions) -> List[Post]:
            posts, _ = self.get_posts(limit, 0, post_filter=PostFilter(**conditions))
            return posts

        topic_count = INDEX_PAGE_SECTIONS["latest_topic"] + INDEX_PAGE_SECTIONS["topics"]
        topics, _ = self.get_topics(topic_count, 0)
        return {
            "latest": latest(INDEX_PAGE_SECTIONS["latest"]),
            "editor_picks": latest(INDEX_PAGE_SECTIONS["editor_picks"], is_featured=True),
            "latest_topic": topics[: INDEX_PAGE_SECTIONS["latest_topic"]],
            "reviews": latest(INDEX_PAGE_SECTIONS["reviews"], style=REVIEW_STYLE),
            "topics": topics[INDEX_PAGE_SECTIONS["latest_topic"] :],
            "photos": latest(INDEX_PAGE_SECTIONS["photos"], style=PHOTOGRAPHY_STYLE),
            "infographics": latest(
                INDEX_PAGE_SECTIONS["infographics"], style=INTERACTIVE_STYLE
            ),
        }

    def get_categories_posts(
        self, limit: int = CATEGORY_POSTS_LIMIT
    ) -> Dict[str, List[Post]]:
        categories: Dict[str, List[Post]] = {}
        for category in CATEGORIES:
            posts, _ = self.get_posts(limit, 0, post_filter=PostFilter(category=category))
            categories[category] = posts
        return categories


__all__ = [
    "CATEGORY_POSTS_LIMIT",
    "INDEX_PAGE_SECTIONS",
    "NewsStorage",
    "PostFilter",
    "order_by",
]
