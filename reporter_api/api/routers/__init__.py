"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .news import router as news_router
from .search import router as search_router
from .system import router as system_router
from .users import router as users_router
from .web_push import router as web_push_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    search_router,
    news_router,
    users_router,
    web_push_router,
    auth_router,
)

__all__ = ["ALL_ROUTERS"]
