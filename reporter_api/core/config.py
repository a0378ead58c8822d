"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Environment ----------------------------------------------------------------
DEVELOPMENT_ENVIRONMENT = "development"
STAGING_ENVIRONMENT = "staging"
PRODUCTION_ENVIRONMENT = "production"

ENVIRONMENT = os.getenv("ENVIRONMENT", DEVELOPMENT_ENVIRONMENT).strip().lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# Application security -------------------------------------------------------
SECRET_KEY = _require_env("SECRET_KEY")

_frontend_origins = _split_csv(_require_env("FRONTEND_ORIGIN"))
FRONTEND_ORIGINS = _frontend_origins
FRONTEND_ORIGIN = FRONTEND_ORIGINS[0] if FRONTEND_ORIGINS else ""


# CORS -----------------------------------------------------------------------
MAIN_SITE_ORIGIN = "https://www.twreporter.org"
SUPPORT_SITE_ORIGIN = "https://support.twreporter.org"
ACCOUNTS_SITE_ORIGIN = "https://accounts.twreporter.org"
MAIN_SITE_STAGING_ORIGIN = "https://staging.twreporter.org"
SUPPORT_SITE_STAGING_ORIGIN = "https://staging-support.twreporter.org"
ACCOUNTS_SITE_STAGING_ORIGIN = "https://staging-accounts.twreporter.org"


def _default_cors_origins(environment: str) -> List[str]:
    if environment == DEVELOPMENT_ENVIRONMENT:
        return ["*"]
    if environment == STAGING_ENVIRONMENT:
        return [
            MAIN_SITE_STAGING_ORIGIN,
            SUPPORT_SITE_STAGING_ORIGIN,
            ACCOUNTS_SITE_STAGING_ORIGIN,
        ]
    if environment == PRODUCTION_ENVIRONMENT:
        return [MAIN_SITE_ORIGIN, SUPPORT_SITE_ORIGIN, ACCOUNTS_SITE_ORIGIN]
    return []


ALLOWED_CORS_ORIGINS = _unique(
    _split_csv(os.getenv("CORS_ALLOW_ORIGINS")) or _default_cors_origins(ENVIRONMENT)
)


# Session cookie -------------------------------------------------------------
COOKIE_DOMAIN = os.getenv("COOKIE_DOMAIN") or None
COOKIE_SECURE = _env_bool("COOKIE_SECURE", ENVIRONMENT != DEVELOPMENT_ENVIRONMENT)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "go-api-session")
SESSION_MAX_AGE = _env_int("SESSION_MAX_AGE", 3600)


# Database -------------------------------------------------------------------
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/app.db")
DB_RESET = _env_bool("DB_RESET", False)


# OAuth providers ------------------------------------------------------------
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
FACEBOOK_CLIENT_ID = os.getenv("FACEBOOK_CLIENT_ID")
FACEBOOK_CLIENT_SECRET = os.getenv("FACEBOOK_CLIENT_SECRET")
OAUTH_REDIRECT_BASE = os.getenv("OAUTH_REDIRECT_BASE", "http://127.0.0.1:8080/v2/auth")


# Search index ---------------------------------------------------------------
ALGOLIA_APPLICATION_ID = os.getenv("ALGOLIA_APPLICATION_ID", "")
ALGOLIA_API_KEY = os.getenv("ALGOLIA_API_KEY", "")


# Local accounts -------------------------------------------------------------
ACTIVATION_TOKEN_TTL_MINUTES = _env_int("ACTIVATION_TOKEN_TTL_MINUTES", 15)
ID_TOKEN_MAX_AGE = _env_int("ID_TOKEN_MAX_AGE", 3600)
ID_TOKEN_ALGORITHM = os.getenv("ID_TOKEN_ALGORITHM", "HS256")


__all__ = [
    "ACTIVATION_TOKEN_TTL_MINUTES",
    "ALGOLIA_API_KEY",
    "ALGOLIA_APPLICATION_ID",
    "ALLOWED_CORS_ORIGINS",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "DEVELOPMENT_ENVIRONMENT",
    "ENVIRONMENT",
    "FACEBOOK_CLIENT_ID",
    "FACEBOOK_CLIENT_SECRET",
    "FRONTEND_ORIGIN",
    "FRONTEND_ORIGINS",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "ID_TOKEN_ALGORITHM",
    "ID_TOKEN_MAX_AGE",
    "LOG_LEVEL",
    "OAUTH_REDIRECT_BASE",
    "PRODUCTION_ENVIRONMENT",
    "SECRET_KEY",
    "SESSION_COOKIE_NAME",
    "SESSION_MAX_AGE",
    "STAGING_ENVIRONMENT",
]
