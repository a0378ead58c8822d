"""OAuth provider registry and profile mapping."""

from __future__ import annotations

from typing import Any, Dict

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.starlette_client import OAuth
from starlette.requests import Request
from starlette.responses import Response

from ..core.config import (
    FACEBOOK_CLIENT_ID,
    FACEBOOK_CLIENT_SECRET,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    OAUTH_REDIRECT_BASE,
)
from ..core.exceptions import AppError, NotFoundError, UnauthorizedError
from ..core.logging import get_logger
from ..models import FACEBOOK_OAUTH, GOOGLE_OAUTH, OAuthAccount

logger = get_logger(__name__)

FACEBOOK_GRAPH_BASE = "https://graph.facebook.com/v18.0/"
FACEBOOK_PROFILE_FIELDS = "id,name,email,first_name,last_name,gender,picture.type(large)"

CREDENTIALS = {
    GOOGLE_OAUTH: (GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET),
    FACEBOOK_OAUTH: (FACEBOOK_CLIENT_ID, FACEBOOK_CLIENT_SECRET),
}
PROVIDERS = tuple(CREDENTIALS)

oauth = OAuth()

# Providers without credentials are registered with placeholders so the app
# can boot; their endpoints answer 500 until configured.
oauth.register(
    name=GOOGLE_OAUTH,
    client_id=GOOGLE_CLIENT_ID or "dummy",
    client_secret=GOOGLE_CLIENT_SECRET or "dummy",
    server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
    client_kwargs={"scope": "openid email profile"},
)
oauth.register(
    name=FACEBOOK_OAUTH,
    client_id=FACEBOOK_CLIENT_ID or "dummy",
    client_secret=FACEBOOK_CLIENT_SECRET or "dummy",
    authorize_url="https://www.facebook.com/v18.0/dialog/oauth",
    access_token_url=f"{FACEBOOK_GRAPH_BASE}oauth/access_token",
    api_base_url=FACEBOOK_GRAPH_BASE,
    client_kwargs={"scope": "email public_profile"},
)


def redirect_uri(provider: str) -> str:
    return f"{OAUTH_REDIRECT_BASE.rstrip('/')}/{provider}/callback"


def _client(provider: str):
    if provider not in CREDENTIALS:
        raise NotFoundError(f"Unknown OAuth provider: {provider}")
    client_id, client_secret = CREDENTIALS[provider]
    if not client_id or not client_secret:
        raise AppError(f"{provider} OAuth not configured")
    return oauth.create_client(provider)


def account_from_google(userinfo: Dict[str, Any]) -> OAuthAccount:
    return OAuthAccount(
        type=GOOGLE_OAUTH,
        a_id=userinfo.get("sub"),
        email=userinfo.get("email"),
        name=userinfo.get("name"),
        first_name=userinfo.get("given_name"),
        last_name=userinfo.get("family_name"),
        gender=userinfo.get("gender"),
        picture=userinfo.get("picture"),
    )


def account_from_facebook(profile: Dict[str, Any]) -> OAuthAccount:
    picture = ((profile.get("picture") or {}).get("data") or {}).get("url")
    return OAuthAccount(
        type=FACEBOOK_OAUTH,
        a_id=profile.get("id"),
        email=profile.get("email"),
        name=profile.get("name"),
        first_name=profile.get("first_name"),
        last_name=profile.get("last_name"),
        gender=profile.get("gender"),
        picture=picture,
    )


async def authorize_redirect(provider: str, request: Request) -> Response:
    client = _client(provider)
    return await client.authorize_redirect(request, redirect_uri(provider))


async def fetch_account(provider: str, request: Request) -> OAuthAccount:
    """Exchange the callback code for a token and read the provider profile."""

    client = _client(provider)
    try:
        token = await client.authorize_access_token(request)
        if provider == GOOGLE_OAUTH:
            userinfo = token.get("userinfo") or await client.userinfo(token=token)
            account = account_from_google(dict(userinfo))
        else:
            response = await client.get(
                "me", params={"fields": FACEBOOK_PROFILE_FIELDS}, token=token
            )
            response.raise_for_status()
            account = account_from_facebook(response.json())
    except (OAuthError, httpx.HTTPError) as exc:
        logger.error("services.oauth.fetch_account.%s: %s", provider, exc)
        raise UnauthorizedError(f"{provider} authorization failed") from exc

    if not account.a_id:
        raise UnauthorizedError(f"Unable to read {provider} profile")
    return account


__all__ = [
    "PROVIDERS",
    "account_from_facebook",
    "account_from_google",
    "authorize_redirect",
    "fetch_account",
    "oauth",
    "redirect_uri",
]
