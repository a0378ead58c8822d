"""Storage access layer over the relational database."""

from .bookmarks import BookmarkStorage
from .news import NewsStorage, PostFilter
from .users import SQLModelUserStorage, UserStorage
from .web_push import WebPushStorage

__all__ = [
    "BookmarkStorage",
    "NewsStorage",
    "PostFilter",
    "SQLModelUserStorage",
    "UserStorage",
    "WebPushStorage",
]
