"""Sign-in flows for OAuth and local (reporter) accounts."""

from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Optional

import bcrypt

from ..core.config import ACTIVATION_TOKEN_TTL_MINUTES
from ..core.exceptions import (
    InvalidInputError,
    InvalidTokenError,
    NotFoundError,
    UnauthorizedError,
)
from ..core.logging import get_logger
from ..core.time import as_utc, utcnow
from ..models import OAuthAccount, ReporterAccount, User
from ..storage import UserStorage

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 8
# bcrypt only looks at the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72


def sign_in_with_oauth(storage: UserStorage, account: OAuthAccount) -> User:
    """Return the user behind a provider identity, creating it on first login.

    Returning users get the provider profile fields refreshed.
    """

    try:
        storage.get_oauth_data(account.a_id, account.type)
    except NotFoundError:
        user = storage.insert_user_by_oauth(account)
        logger.info("New %s user created: %s", account.type, user.id)
        return user

    storage.update_oauth_data(account)
    user = storage.get_user_data_by_oauth(account)
    logger.info("%s user signed in: %s", account.type, user.id)
    return user


def sign_in_with_email(
    storage: UserStorage, email: str, *, ttl_minutes: int = ACTIVATION_TOKEN_TTL_MINUTES
) -> ReporterAccount:
    """Issue a fresh activation token for ``email``.

    The first sign-in for an address creates the user together with its
    reporter account.
    """

    token = secrets.token_urlsafe(32)
    expires_at = utcnow() + timedelta(minutes=ttl_minutes)

    try:
        account = storage.get_reporter_account_data(email)
    except NotFoundError:
        account = ReporterAccount(
            account=email, activate_token=token, activate_expires_at=expires_at
        )
        storage.insert_user_by_reporter_account(account)
        return account

    return storage.update_reporter_account_activate_token(account, token, expires_at)


def activate(storage: UserStorage, email: str, token: str) -> User:
    """Check the activation token, mark the account active and return its user."""

    try:
        account = storage.get_reporter_account_data(email)
    except NotFoundError as exc:
        raise InvalidTokenError() from exc

    if not account.activate_token or not secrets.compare_digest(
        account.activate_token, token
    ):
        raise InvalidTokenError()
    if account.activate_expires_at is None or as_utc(account.activate_expires_at) < utcnow():
        raise InvalidTokenError("Activation token expired")

    storage.activate_reporter_account(account)
    return storage.get_user_data_by_reporter_account(account)


def hash_password(password: str) -> str:
    password_bytes = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    password_bytes = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(password_bytes, hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def set_password(storage: UserStorage, user: User, password: str) -> ReporterAccount:
    """Store a new password on the reporter account owned by ``user``.

    Users who only ever signed in through OAuth have no reporter account and
    get ``NotFoundError``.
    """

    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidInputError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    account = storage.get_reporter_account_by_user_id(user.id)
    return storage.update_reporter_account_password(account, hash_password(password))


def authenticate(storage: UserStorage, email: str, password: str) -> User:
    try:
        account = storage.get_reporter_account_data(email)
    except NotFoundError as exc:
        raise UnauthorizedError("Incorrect email or password") from exc

    if not verify_password(password, account.password):
        raise UnauthorizedError("Incorrect email or password")
    if not account.active:
        raise UnauthorizedError("Account is not activated")
    return storage.get_user_data_by_reporter_account(account)


__all__ = [
    "MIN_PASSWORD_LENGTH",
    "activate",
    "authenticate",
    "hash_password",
    "set_password",
    "sign_in_with_email",
    "sign_in_with_oauth",
    "verify_password",
]
