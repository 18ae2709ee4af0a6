"""Error types specific to the CMS client layer.

Purpose:
- Provide typed exceptions thrown by ``CmsApiClient`` and consumers of the
  CMS REST API.
- Expose HTTP-oriented context (status code, error body) so the gateway can
  relay upstream failures faithfully.

Usage:
- Catch ``CmsApiError`` for general failures and inspect ``status_code`` or
  ``details``. Transport failures (CMS unreachable, timeouts) carry 502.
- Catch ``CmsResourceNotFoundError`` when a lookup returns 404.
"""

from __future__ import annotations

from typing import Any, Optional


class CmsApiError(Exception):
    """Base error for CMS API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional structured payload from the CMS (e.g., JSON error body).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class CmsResourceNotFoundError(CmsApiError):
    """Raised when the requested CMS resource cannot be found (HTTP 404).

    Args:
        resource: Resource kind, e.g. ``"Article"``.
        identifier: The id or slug that was not found.
        details: Optional upstream error body.
    """

    def __init__(self, resource: str, identifier: str, *, details: Optional[Any] = None) -> None:
        super().__init__(f"{resource} not found: {identifier}", status_code=404, details=details)
        self.resource = resource
        self.identifier = identifier
