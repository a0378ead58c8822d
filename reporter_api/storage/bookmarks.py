"""Storage for bookmarks and the users_bookmarks link table."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from ..core.exceptions import NotFoundError, WriteError
from ..core.logging import get_logger
from ..models import Bookmark, User, UserBookmark

logger = get_logger(__name__)


class BookmarkStorage:
    """Bookmark operations scoped to a single user."""

    def __init__(self, session: Session):
        self.session = session

    def get_bookmarks_of_a_user(
        self, user_id: int, limit: int, offset: int
    ) -> Tuple[List[Bookmark], int]:
        """Return one page of a user's bookmarks, newest first, and the total."""

        total = self.session.exec(
            select(func.count())
            .select_from(UserBookmark)
            .where(UserBookmark.user_id == user_id)
        ).one()
        bookmarks = self.session.exec(
            select(Bookmark)
            .join(UserBookmark, UserBookmark.bookmark_id == Bookmark.id)
            .where(UserBookmark.user_id == user_id)
            .order_by(UserBookmark.created_at.desc(), UserBookmark.id.desc())
            .offset(offset)
            .limit(limit)
        ).all()
        return list(bookmarks), int(total)

    def get_a_bookmark_of_a_user(self, user_id: int, slug: str, host: str = "") -> Bookmark:
        query = (
            select(Bookmark)
            .join(UserBookmark, UserBookmark.bookmark_id == Bookmark.id)
            .where(UserBookmark.user_id == user_id, Bookmark.slug == slug)
        )
        if host:
            query = query.where(Bookmark.host == host)
        bookmark = self.session.exec(query).first()
        if bookmark is None:
            raise NotFoundError("Bookmark not found")
        return bookmark

    def create_a_bookmark_of_a_user(self, user_id: int, bookmark: Bookmark) -> Bookmark:
        """Store ``bookmark`` (or reuse the one with the same slug/host) for a user.

        Saving the same bookmark twice keeps a single link.
        """

        if self.session.get(User, user_id) is None:
            raise NotFoundError("User not found")

        stored = self.session.exec(
            select(Bookmark).where(
                Bookmark.slug == bookmark.slug, Bookmark.host == bookmark.host
            )
        ).first()
        try:
            if stored is None:
                self.session.add(bookmark)
                self.session.flush()
                stored = bookmark
            if self._link(user_id, stored.id) is None:
                self.session.add(UserBookmark(user_id=user_id, bookmark_id=stored.id))
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("storage.bookmarks.create_a_bookmark_of_a_user: %s", exc)
            raise WriteError("Failed to create bookmark") from exc
        self.session.refresh(stored)
        return stored

    def delete_a_bookmark_of_a_user(self, user_id: int, bookmark_id: int) -> None:
        link = self._link(user_id, bookmark_id)
        if link is None:
            raise NotFoundError("Bookmark not found")
        try:
            self.session.delete(link)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("storage.bookmarks.delete_a_bookmark_of_a_user: %s", exc)
            raise WriteError("Failed to delete bookmark") from exc

    def _link(self, user_id: int, bookmark_id: int) -> Optional[UserBookmark]:
        return self.session.exec(
            select(UserBookmark).where(
                UserBookmark.user_id == user_id, UserBookmark.bookmark_id == bookmark_id
            )
        ).first()


__all__ = ["BookmarkStorage"]
