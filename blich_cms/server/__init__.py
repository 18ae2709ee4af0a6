"""
Blich CMS Server Package.

This package contains the CMS web server: content storage and the admin API
for the Blich Studio website.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration and constants.
    exception_handlers: Mapping of domain errors to HTTP responses.
    middleware: Request logging and timing.
    services: Business logic and service layer.
"""
