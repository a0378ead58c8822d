"""Database model exports."""

from .bookmark import Bookmark, UserBookmark
from .news import (
    ARTICLE_STYLE,
    CATEGORIES,
    DRAFT_STATE,
    INTERACTIVE_STYLE,
    PHOTOGRAPHY_STYLE,
    PUBLISHED_STATE,
    REVIEW_STYLE,
    Author,
    Post,
    Topic,
)
from .oauth import FACEBOOK_OAUTH, GOOGLE_OAUTH, OAuthAccount
from .reporter import ReporterAccount
from .user import PRIVILEGE_ADMIN, PRIVILEGE_MEMBER, PRIVILEGE_REGISTERED, User
from .web_push import WebPushSubscription

__all__ = [
    "ARTICLE_STYLE",
    "Author",
    "Bookmark",
    "CATEGORIES",
    "DRAFT_STATE",
    "FACEBOOK_OAUTH",
    "GOOGLE_OAUTH",
    "INTERACTIVE_STYLE",
    "OAuthAccount",
    "PHOTOGRAPHY_STYLE",
    "PRIVILEGE_ADMIN",
    "PRIVILEGE_MEMBER",
    "PRIVILEGE_REGISTERED",
    "PUBLISHED_STATE",
    "Post",
    "REVIEW_STYLE",
    "ReporterAccount",
    "Topic",
    "User",
    "UserBookmark",
    "WebPushSubscription",
]
