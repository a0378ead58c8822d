"""Helpers that turn database models into API-friendly dicts."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional

from ..models import Author, Bookmark, Post, Topic, User, WebPushSubscription


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def user_to_dict(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "gender": user.gender,
        "privilege": user.privilege,
        "registration_date": _iso(user.registration_date),
    }


def bookmark_to_dict(bookmark: Bookmark) -> Dict[str, Any]:
    return {
        "id": bookmark.id,
        "slug": bookmark.slug,
        "host": bookmark.host,
        "title": bookmark.title,
        "desc": bookmark.description,
        "thumbnail": bookmark.thumbnail,
        "category": bookmark.category,
        "is_external": bookmark.is_external,
        "published_date": _iso(bookmark.published_date),
        "created_at": _iso(bookmark.created_at),
    }


def subscription_to_dict(subscription: WebPushSubscription) -> Dict[str, Any]:
    """Serialise a push subscription; ``keys`` is stored as a JSON string."""

    return {
        "id": subscription.id,
        "endpoint": subscription.endpoint,
        "keys": json.loads(subscription.keys or "{}"),
        "expiration_time": _iso(subscription.expiration_time),
        "user_id": subscription.user_id,
    }


def author_to_dict(author: Author) -> Dict[str, Any]:
    return {
        "id": author.id,
        "name": author.name,
        "job_title": author.job_title,
        "bio": author.bio,
        "email": author.email,
        "thumbnail": author.thumbnail,
        "updated_at": _iso(author.updated_at),
    }


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    return {
        "id": topic.id,
        "slug": topic.slug,
        "title": topic.title,
        "short_title": topic.short_title,
        "og_description": topic.og_description,
        "og_image": topic.og_image,
        "leading_image": topic.leading_image,
        "published_date": _iso(topic.published_date),
        "updated_at": _iso(topic.updated_at),
    }


def post_to_dict(post: Post) -> Dict[str, Any]:
    return {
        "id": post.id,
        "slug": post.slug,
        "title": post.title,
        "subtitle": post.subtitle,
        "style": post.style,
        "category": post.category,
        "og_description": post.og_description,
        "og_image": post.og_image,
        "hero_image": post.hero_image,
        "is_featured": post.is_featured,
        "topic_id": post.topic_id,
        "published_date": _iso(post.published_date),
        "updated_at": _iso(post.updated_at),
    }


__all__ = [
    "author_to_dict",
    "bookmark_to_dict",
    "post_to_dict",
    "subscription_to_dict",
    "topic_to_dict",
    "user_to_dict",
]
