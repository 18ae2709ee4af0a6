"""
Exception handlers for the CMS server.

This package contains custom exception handlers for domain errors, request
validation, database conflicts and unhandled exceptions, and a setup function
to register them with the FastAPI application.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blich_cms.core.errors import CmsError
from blich_cms.core.logging_config import get_logger

from .domain_handler import (
    cms_error_handler,
    http_exception_handler,
    integrity_error_handler,
    request_validation_handler,
)
from .global_handler import global_exception_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(CmsError, cms_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = [
    "cms_error_handler",
    "global_exception_handler",
    "http_exception_handler",
    "integrity_error_handler",
    "request_validation_handler",
    "setup_exception_handlers",
]
