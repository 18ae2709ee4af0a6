"""Async client for the Blich CMS REST API, used by the gateway."""

from .client import CmsApiClient
from .dto import CmsArticleDTO, CmsArticleListPayloadDTO
from .errors import CmsApiError, CmsResourceNotFoundError

__all__ = [
    "CmsApiClient",
    "CmsApiError",
    "CmsArticleDTO",
    "CmsArticleListPayloadDTO",
    "CmsResourceNotFoundError",
]
