"""Core configuration and infrastructure helpers."""

from .config import (
    ACTIVATION_TOKEN_TTL_MINUTES,
    ALGOLIA_API_KEY,
    ALGOLIA_APPLICATION_ID,
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    ENVIRONMENT,
    FACEBOOK_CLIENT_ID,
    FACEBOOK_CLIENT_SECRET,
    FRONTEND_ORIGIN,
    FRONTEND_ORIGINS,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    ID_TOKEN_ALGORITHM,
    ID_TOKEN_MAX_AGE,
    LOG_LEVEL,
    OAUTH_REDIRECT_BASE,
    SECRET_KEY,
    SESSION_COOKIE_NAME,
    SESSION_MAX_AGE,
)
from .database import build_engine, get_session, init_db
from .time import as_utc, utcnow

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
    "SECRET_KEY",
    "SESSION_COOKIE_NAME",
    "SESSION_MAX_AGE",
    "as_utc",
    "build_engine",
    "get_session",
    "init_db",
    "utcnow",
]
