"""JWT ID tokens handed to clients that cannot carry the session cookie."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from ..core.config import ID_TOKEN_ALGORITHM, ID_TOKEN_MAX_AGE, SECRET_KEY
from ..core.exceptions import InvalidTokenError
from ..models import User

TOKEN_TYPE = "Bearer"


def issue_id_token(user: User, expires_in: int = ID_TOKEN_MAX_AGE) -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    token = jwt.encode(payload, SECRET_KEY, algorithm=ID_TOKEN_ALGORITHM)
    return {"token": token, "token_type": TOKEN_TYPE, "expires_in": expires_in}


def read_id_token(token: str) -> int:
    """Return the user id carried by ``token``.

    Tampered, foreign and expired tokens raise ``InvalidTokenError``.
    """

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ID_TOKEN_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise InvalidTokenError("Token expired") from exc
    except jwt.PyJWTError as exc:
        raise InvalidTokenError() from exc
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError() from exc


__all__ = ["TOKEN_TYPE", "issue_id_token", "read_id_token"]
