"""Core models and schemas for the CMS wire contract."""
