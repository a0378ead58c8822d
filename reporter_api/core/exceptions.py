"""Application exception hierarchy.

Every exception here carries the HTTP status and the message the API
returns; the handler registered in ``create_app`` renders them as
``{"status": "error", "message": ...}``.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for failures that surface as an HTTP error response."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidInputError(AppError):
    status_code = 400
    message = "Invalid request"


class StorageError(AppError):
    """Raised by the storage layer."""


class NotFoundError(StorageError):
    status_code = 404
    message = "Record not found"


class WriteError(StorageError):
    status_code = 500
    message = "Failed to write record"


class DuplicateError(StorageError):
    status_code = 409
    message = "Record already exists"


class UnauthorizedError(AppError):
    status_code = 401
    message = "Not authenticated"


class InvalidTokenError(UnauthorizedError):
    message = "Invalid or expired token"


class ForbiddenError(AppError):
    status_code = 403
    message = "Permission denied"


class SearchError(AppError):
    status_code = 500
    message = "Search service unavailable"


__all__ = [
    "AppError",
    "DuplicateError",
    "ForbiddenError",
    "InvalidInputError",
    "InvalidTokenError",
    "NotFoundError",
    "SearchError",
    "StorageError",
    "UnauthorizedError",
    "WriteError",
]
