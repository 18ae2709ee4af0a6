"""
Middleware modules shared by the CMS server and the API gateway.
"""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
