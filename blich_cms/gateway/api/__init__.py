"""FastAPI route definitions of the API gateway."""
