"""FastAPI route definitions of the CMS server."""
