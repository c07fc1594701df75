"""Error types of the inventory layer.

Every error carries an HTTP status and a stable ``code`` string; ``server.py``
turns them into ``{"success": false, "error": code, "message": ...}``.
"""

from __future__ import annotations

from typing import Any, Dict


class AppError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500
    code = "APP_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.code, "message": self.message}


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource


class DuplicateError(AppError):
    status_code = 409
    code = "DUPLICATE_ERROR"


class StorageError(AppError):
    status_code = 500
    code = "DATABASE_ERROR"
