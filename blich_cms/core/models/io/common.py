"""
Shared building blocks for the I/O models.

Every public JSON payload of the CMS uses camelCase keys while the Python side
keeps snake_case attribute names, so all I/O models derive from ``CamelModel``.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def is_valid_slug(value: str) -> bool:
    """Check that a slug is lowercase words separated by single hyphens."""
    return bool(SLUG_PATTERN.match(value))
