from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .dto import CmsArticleDTO, CmsArticleListPayloadDTO
from .errors import CmsApiError, CmsResourceNotFoundError


def _segment(value: str) -> str:
    """Percent-encode ``value`` as a single path segment.

    Dots are encoded as well so that ``.`` and ``..`` cannot be collapsed
    into a different CMS route.
    """
    return quote(value, safe="").replace(".", "%2E")


class CmsApiClient:
    """
    Thin async HTTP client for the Blich CMS server.

    Responsibilities:
    - list_articles / get_article (``/api/v1/cms/articles``), parsed into DTOs
    - list_games / get_game / list_blog_posts / get_blog_post (``/api/cms``),
      returned as raw JSON for pass-through proxying

    Note: This client is read-only. Content is managed through the CMS admin API.
    """

    def __init__(
        self,
        base_url: str,
        *,
        auth_token: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    async def list_articles(
        self,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[CmsArticleDTO]:
        params = {k: v for k, v in {"page": page, "limit": limit, "status": status}.items() if v is not None}
        data = await self._get("/api/v1/cms/articles", operation="list_articles", params=params or None)
        try:
            payload = CmsArticleListPayloadDTO.model_validate(data)
        except ValidationError as e:
            raise CmsApiError("Unexpected response shape from list_articles", status_code=502, details=data) from e
        self._logger.debug("CmsApiClient.list_articles: got %d articles", len(payload.data))
        return payload.data

    async def get_article(self, article_id: str) -> CmsArticleDTO:
        data = await self._get(
            f"/api/v1/cms/articles/{_segment(article_id)}",
            operation="get_article",
            resource="Article",
            identifier=article_id,
        )
        if not isinstance(data, dict):
            raise CmsApiError("Unexpected response shape from get_article", status_code=502, details=data)
        try:
            return CmsArticleDTO.model_validate(data)
        except ValidationError as e:
            raise CmsApiError("Unexpected response shape from get_article", status_code=502, details=data) from e

    async def list_games(self, *, published: Optional[bool] = None) -> Any:
        params = None if published is None else {"published": str(published).lower()}
        return await self._get("/api/cms/games", operation="list_games", params=params)

    async def get_game(self, slug: str) -> Any:
        return await self._get(f"/api/cms/games/{_segment(slug)}", operation="get_game", resource="Game", identifier=slug)

    async def list_blog_posts(self, *, page: Optional[int] = None, limit: Optional[int] = None) -> Any:
        params = {k: v for k, v in {"page": page, "limit": limit}.items() if v is not None}
        return await self._get("/api/cms/blog", operation="list_blog_posts", params=params or None)

    async def get_blog_post(self, slug: str) -> Any:
        return await self._get(
            f"/api/cms/blog/{_segment(slug)}", operation="get_blog_post", resource="Blog post", identifier=slug
        )

    async def _get(
        self,
        path: str,
        *,
        operation: str,
        resource: Optional[str] = None,
        identifier: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        self._logger.debug("CmsApiClient.%s: GET %s params=%s", operation, url, params)
        try:
            r = await self._client.get(url, headers=self._headers(), params=params)
            if r.status_code == 404 and resource is not None:
                raise CmsResourceNotFoundError(resource, identifier or "", details=self._body(r))
            r.raise_for_status()
        except CmsResourceNotFoundError:
            raise
        except httpx.HTTPStatusError as e:
            raise CmsApiError(
                f"CMS {operation} failed: {e.response.status_code}",
                status_code=e.response.status_code,
                details=self._body(e.response),
            ) from e
        except httpx.TransportError as e:
            self._logger.warning("CmsApiClient.%s: CMS unreachable at %s: %s", operation, url, e)
            raise CmsApiError(f"CMS request failed: {e}", status_code=502) from e
        return self._body(r)

    @staticmethod
    def _body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
