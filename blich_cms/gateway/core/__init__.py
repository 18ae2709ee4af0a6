"""Configuration and request guards of the API gateway."""
