"""Public read endpoints for authors, posts, topics and the index page."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ...services.serializers import author_to_dict, post_to_dict, topic_to_dict
from ...storage import PostFilter
from ..deps import NewsStorageDep, cache_control, success

router = APIRouter(prefix="/v1", tags=["news"])

AUTHORS_CACHE = Depends(cache_control("public,max-age=600"))
CONTENT_CACHE = Depends(cache_control("public,max-age=900"))
INDEX_PAGE_CACHE = Depends(cache_control("public,max-age=1800"))


def _listing(records: List[Dict[str, Any]], total: int, offset: int, limit: int):
    return success(
        {"records": records, "meta": {"total": total, "offset": offset, "limit": limit}}
    )


@router.get("/authors", dependencies=[AUTHORS_CACHE])
def get_authors(
    storage: NewsStorageDep,
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
    sort: str = "-updated_at",
):
    authors, total = storage.get_authors(limit, offset, sort)
    return _listing([author_to_dict(author) for author in authors], total, offset, limit)


@router.get("/posts", dependencies=[CONTENT_CACHE])
def get_posts(
    storage: NewsStorageDep,
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
    sort: str = "-published_date",
    category: Optional[str] = None,
    style: Optional[str] = None,
    topic: Optional[str] = Query(None, description="Topic slug"),
    featured: Optional[bool] = None,
):
    post_filter = PostFilter(category=category, style=style, is_featured=featured)
    if topic:
        post_filter.topic_id = storage.get_a_topic(topic).id
    posts, total = storage.get_posts(limit, offset, sort, post_filter)
    return _listing([post_to_dict(post) for post in posts], total, offset, limit)


@router.get("/posts/{slug}", dependencies=[CONTENT_CACHE])
def get_a_post(slug: str, storage: NewsStorageDep):
    return success(post_to_dict(storage.get_a_post(slug)))


@router.get("/topics", dependencies=[CONTENT_CACHE])
def get_topics(
    storage: NewsStorageDep,
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
    sort: str = "-published_date",
):
    topics, total = storage.get_topics(limit, offset, sort)
    return _listing([topic_to_dict(topic) for topic in topics], total, offset, limit)


@router.get("/topics/{slug}", dependencies=[CONTENT_CACHE])
def get_a_topic(slug: str, storage: NewsStorageDep, limit: int = Query(20, ge=1, le=100)):
    """Return a topic together with its published posts."""

    topic = storage.get_a_topic(slug)
    posts, _ = storage.get_posts(limit, 0, post_filter=PostFilter(topic_id=topic.id))
    data = topic_to_dict(topic)
    data["posts"] = [post_to_dict(post) for post in posts]
    return success(data)


@router.get("/index_page", dependencies=[INDEX_PAGE_CACHE])
def get_index_page_contents(storage: NewsStorageDep):
    sections = storage.get_index_page_contents()
    serializers = {"latest_topic": topic_to_dict, "topics": topic_to_dict}
    return success(
        {
            name: [serializers.get(name, post_to_dict)(record) for record in records]
            for name, records in sections.items()
        }
    )


@router.get("/index_page_categories", dependencies=[INDEX_PAGE_CACHE])
def get_categories_posts(storage: NewsStorageDep):
    return success(
        {
            category: [post_to_dict(post) for post in posts]
            for category, posts in storage.get_categories_posts().items()
        }
    )


__all__ = ["router"]
