"""
Global Exception Handler for the CMS server.

This module provides the last-resort handler that catches all unhandled
exceptions and logs detailed information including error ID, request context,
and full traceback for debugging purposes.
"""

import traceback
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from blich_cms.core.logging_config import get_logger
from blich_cms.core.monitoring import log_error
from blich_cms.server.core.config import settings

logger = get_logger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unhandled exception and answer with a generic 500.

    The response carries an ``error_id`` that clients can quote when reporting
    the problem. The raw exception message is only exposed in development.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = uuid.uuid4().hex[:12]

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    content = {"error": "Internal server error", "error_id": error_id}
    if settings.is_development:
        content["message"] = str(exc)
    return JSONResponse(status_code=500, content=content)
