"""Domain error types shared by the CMS server and the API gateway.

Purpose:
- Give services a small, typed vocabulary for failures that maps one-to-one
  onto HTTP status codes (see ``blich_cms.server.exception_handlers``).
- Keep framework types (``HTTPException``) out of the service and repository
  layers.

Usage:
- Raise ``ValidationError`` for bad input, ``NotFoundError`` for missing
  records, ``ConflictError`` for unique-key clashes, ``DatabaseError`` for
  storage failures and ``AuthenticationError`` for rejected credentials.
"""

from __future__ import annotations

from typing import Optional


class CmsError(Exception):
    """Base error for all CMS domain failures.

    Args:
        message: Human-readable error description.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CmsError):
    """Raised when input data fails validation (HTTP 400).

    Args:
        message: Description of the validation failure.
        field: Optional name of the offending field.
    """

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(CmsError):
    """Raised when a requested resource does not exist (HTTP 404).

    Args:
        resource: Resource name, e.g. ``"Article"``. The message becomes ``"Article not found"``.
    """

    status_code = 404

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource


class ConflictError(CmsError):
    """Raised when a write collides with an existing unique value (HTTP 409)."""

    status_code = 409


class AuthenticationError(CmsError):
    """Raised when credentials or bearer tokens are rejected (HTTP 401)."""

    status_code = 401


class DatabaseError(CmsError):
    """Raised when the storage layer fails unexpectedly (HTTP 500)."""

    status_code = 500
