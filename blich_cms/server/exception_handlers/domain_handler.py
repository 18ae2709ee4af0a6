"""
Domain Exception Handlers.

Map ``blich_cms.core.errors`` types, request validation failures, unique-key
violations and unknown routes onto the CMS error body
``{"error": str, "message"?: str, "details"?: {...}}``.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blich_cms.core.errors import CmsError, DatabaseError, ValidationError
from blich_cms.core.logging_config import get_logger

logger = get_logger(__name__)


async def cms_error_handler(request: Request, exc: CmsError) -> JSONResponse:
    """Answer a domain error with its own status code."""
    if isinstance(exc, DatabaseError):
        logger.error(f"Database error in {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "Database operation failed", "message": exc.message},
        )

    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}")

    content = {"error": exc.message}
    if isinstance(exc, ValidationError) and exc.field:
        content["details"] = {"field": exc.field}
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies, paths or query strings with 400."""
    errors = []
    for error in exc.errors():
        # Drop the "body" / "query" / "path" prefix from the location
        loc = [str(part) for part in error.get("loc", ())[1:]] or [str(part) for part in error.get("loc", ())]
        errors.append({"field": ".".join(loc), "message": error.get("msg", "Invalid value")})

    logger.info(f"Request validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation failed",
            "message": ", ".join(f"{e['field']}: {e['message']}" for e in errors),
            "details": {"validationErrors": errors},
        },
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"Integrity violation in {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=409, content={"error": "Resource already exists"})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown routes, wrong methods) in the CMS error shape."""
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)
