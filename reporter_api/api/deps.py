"""Dependency injection helpers for the API routers."""

from __future__ import annotations

from typing import Annotated, Any, Callable, Dict, Optional

from fastapi import Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from ..core.database import get_session
from ..core.exceptions import ForbiddenError, UnauthorizedError
from ..services.search import AlgoliaSearchClient
from ..services.tokens import read_id_token
from ..storage import BookmarkStorage, NewsStorage, SQLModelUserStorage, WebPushStorage

bearer = HTTPBearer(auto_error=False)


def get_user_storage(session: Session = Depends(get_session)) -> SQLModelUserStorage:
    return SQLModelUserStorage(session)


def get_bookmark_storage(session: Session = Depends(get_session)) -> BookmarkStorage:
    return BookmarkStorage(session)


def get_web_push_storage(session: Session = Depends(get_session)) -> WebPushStorage:
    return WebPushStorage(session)


def get_news_storage(session: Session = Depends(get_session)) -> NewsStorage:
    return NewsStorage(session)


def get_search_client(request: Request) -> AlgoliaSearchClient:
    return request.app.state.search_client


def cache_control(value: str) -> Callable[[Response], None]:
    """Build a dependency that sets ``Cache-Control`` on the route's response."""

    def _set_cache_control(response: Response) -> None:
        response.headers["Cache-Control"] = value

    return _set_cache_control


def current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> int:
    """Return the signed-in user's id.

    A ``Bearer`` ID token takes precedence over the session cookie.
    """

    if credentials is not None:
        return read_id_token(credentials.credentials)

    uid = request.session.get("uid")
    if uid is None:
        raise UnauthorizedError()
    try:
        return int(uid)
    except (TypeError, ValueError) as exc:
        request.session.clear()
        raise UnauthorizedError("Invalid session") from exc


def authorized_user_id(user_id: int, uid: int = Depends(current_user_id)) -> int:
    """Ensure the ``user_id`` path parameter belongs to the signed-in user."""

    if user_id != uid:
        raise ForbiddenError()
    return user_id


def success(data: Any = None) -> Dict[str, Any]:
    return {"status": "success", "data": data}


UserStorageDep = Annotated[SQLModelUserStorage, Depends(get_user_storage)]
BookmarkStorageDep = Annotated[BookmarkStorage, Depends(get_bookmark_storage)]
WebPushStorageDep = Annotated[WebPushStorage, Depends(get_web_push_storage)]
NewsStorageDep = Annotated[NewsStorage, Depends(get_news_storage)]
SearchClientDep = Annotated[AlgoliaSearchClient, Depends(get_search_client)]
CurrentUserIdDep = Annotated[int, Depends(current_user_id)]
AuthorizedUserIdDep = Annotated[int, Depends(authorized_user_id)]

NO_STORE = Depends(cache_control("no-store"))

__all__ = [
    "AuthorizedUserIdDep",
    "BookmarkStorageDep",
    "CurrentUserIdDep",
    "NO_STORE",
    "NewsStorageDep",
    "SearchClientDep",
    "UserStorageDep",
    "WebPushStorageDep",
    "cache_control",
    "current_user_id",
    "success",
]
