"""Sign-in endpoints for OAuth providers and local accounts."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, EmailStr

from ...core import FRONTEND_ORIGIN, FRONTEND_ORIGINS
from ...core.logging import get_logger
from ...services import membership, oauth, tokens
from ...services.serializers import user_to_dict
from ..deps import NO_STORE, CurrentUserIdDep, UserStorageDep, success

logger = get_logger(__name__)

router = APIRouter(prefix="/v2/auth", tags=["auth"])


class SignInRequest(BaseModel):
    email: EmailStr
    destination: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class PasswordRequest(BaseModel):
    password: str


def _origin_of(url: str) -> Optional[str]:
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if parts.username is not None or parts.password is not None:
        return None
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        return None
    return f"{parts.scheme}://{parts.netloc}".lower()


def _safe_destination(destination: Optional[str]) -> str:
    """Only redirect back to the front-end sites.

    The destination's ``scheme://host[:port]`` must equal one of the
    configured origins; anything else falls back to the main front end.
    """

    if destination:
        origin = _origin_of(destination)
        allowed = {item.rstrip("/").lower() for item in FRONTEND_ORIGINS}
        if origin is not None and origin in allowed:
            return destination
    return FRONTEND_ORIGIN


def _redirect(url: str) -> RedirectResponse:
    response = RedirectResponse(url, status_code=302)
    response.headers["Cache-Control"] = "no-store"
    return response


@router.post("/signin", dependencies=[NO_STORE])
def sign_in(body: SignInRequest, storage: UserStorageDep):
    """Start a passwordless sign-in by issuing an activation token."""

    account = membership.sign_in_with_email(storage, body.email)
    logger.info("Activation token issued for reporter account %s", account.id)
    return success(
        {
            "email": account.account,
            "destination": _safe_destination(body.destination),
        }
    )


@router.get("/activate")
def activate(
    request: Request,
    email: str,
    token: str,
    storage: UserStorageDep,
    destination: Optional[str] = None,
):
    user = membership.activate(storage, email, token)
    request.session["uid"] = str(user.id)
    request.session["email"] = user.email
    return _redirect(_safe_destination(destination))


@router.post("/login", dependencies=[NO_STORE])
def login(request: Request, body: LoginRequest, storage: UserStorageDep):
    user = membership.authenticate(storage, body.email, body.password)
    request.session["uid"] = str(user.id)
    request.session["email"] = user.email
    return success(user_to_dict(user))


@router.post("/password", dependencies=[NO_STORE])
def change_password(body: PasswordRequest, uid: CurrentUserIdDep, storage: UserStorageDep):
    user = storage.get_user_by_id(uid)
    membership.set_password(storage, user, body.password)
    return success()


@router.get("/me", dependencies=[NO_STORE])
def me(uid: CurrentUserIdDep, storage: UserStorageDep):
    return success(user_to_dict(storage.get_user_by_id(uid)))


@router.post("/token", dependencies=[NO_STORE])
def dispatch_token(uid: CurrentUserIdDep, storage: UserStorageDep):
    """Hand the signed-in user a short-lived ``Bearer`` ID token."""

    user = storage.get_user_by_id(uid)
    logger.info("ID token issued for user %s", user.id)
    return success(tokens.issue_id_token(user))


@router.get("/logout")
def logout(request: Request, destination: Optional[str] = None):
    request.session.clear()
    return _redirect(_safe_destination(destination))


# Provider routes come last so "/{provider}" does not shadow the paths above.
@router.get("/{provider}")
async def oauth_start(request: Request, provider: str, destination: Optional[str] = None):
    if destination:
        request.session["destination"] = destination
    response = await oauth.authorize_redirect(provider, request)
    response.headers["Cache-Control"] = "no-store"
    return response


@router.get("/{provider}/callback")
async def oauth_callback(request: Request, provider: str, storage: UserStorageDep):
    account = await oauth.fetch_account(provider, request)
    user = membership.sign_in_with_oauth(storage, account)
    request.session["uid"] = str(user.id)
    request.session["email"] = user.email
    return _redirect(_safe_destination(request.session.pop("destination", None)))


__all__ = ["router"]
