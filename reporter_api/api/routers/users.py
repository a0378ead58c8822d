"""Bookmark endpoints for signed-in users."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query, Response
from pydantic import BaseModel, Field

from ...models import Bookmark
from ...services.serializers import bookmark_to_dict
from ..deps import NO_STORE, AuthorizedUserIdDep, BookmarkStorageDep, success

router = APIRouter(prefix="/v1/users", tags=["users"], dependencies=[NO_STORE])


class BookmarkCreate(BaseModel):
    slug: str = Field(min_length=1)
    host: str = ""
    title: str = ""
    desc: Optional[str] = None
    thumbnail: Optional[str] = None
    category: Optional[str] = None
    is_external: bool = False
    published_date: Optional[datetime] = None


@router.get("/{user_id}/bookmarks")
def get_bookmarks_of_a_user(
    user_id: AuthorizedUserIdDep,
    storage: BookmarkStorageDep,
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
):
    bookmarks, total = storage.get_bookmarks_of_a_user(user_id, limit, offset)
    return success(
        {
            "records": [bookmark_to_dict(bookmark) for bookmark in bookmarks],
            "meta": {"total": total, "offset": offset, "limit": limit},
        }
    )


@router.get("/{user_id}/bookmarks/{slug}")
def get_a_bookmark_of_a_user(
    user_id: AuthorizedUserIdDep,
    slug: str,
    storage: BookmarkStorageDep,
    host: str = "",
):
    bookmark = storage.get_a_bookmark_of_a_user(user_id, slug, host)
    return success(bookmark_to_dict(bookmark))


@router.post("/{user_id}/bookmarks", status_code=201)
def create_a_bookmark_of_a_user(
    user_id: AuthorizedUserIdDep, body: BookmarkCreate, storage: BookmarkStorageDep
):
    bookmark = Bookmark(
        slug=body.slug,
        host=body.host,
        title=body.title,
        description=body.desc,
        thumbnail=body.thumbnail,
        category=body.category,
        is_external=body.is_external,
        published_date=body.published_date,
    )
    stored = storage.create_a_bookmark_of_a_user(user_id, bookmark)
    return success(bookmark_to_dict(stored))


@router.delete("/{user_id}/bookmarks/{bookmark_id}", status_code=204)
def delete_a_bookmark_of_a_user(
    user_id: AuthorizedUserIdDep, bookmark_id: int, storage: BookmarkStorageDep
):
    storage.delete_a_bookmark_of_a_user(user_id, bookmark_id)
    return Response(status_code=204, headers={"Cache-Control": "no-store"})


__all__ = ["router"]
