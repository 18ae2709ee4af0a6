"""Configuration and constants of the CMS server."""
