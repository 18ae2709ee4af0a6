"""
GraphQL schema of the gateway.

Resolvers fetch from the CMS through ``CmsApiClient``. CMS failures become
GraphQL errors (the HTTP status stays 200) carrying the upstream status code
in ``extensions.statusCode``.
"""

from typing import Any, Dict, List, Optional

import strawberry
from fastapi import Depends
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from blich_cms.core.logging_config import get_logger
from blich_cms.gateway.cms_client import CmsApiClient, CmsApiError

from ..api.deps import get_cms_client
from .types import Article

logger = get_logger(__name__)


def _to_graphql_error(error: CmsApiError) -> GraphQLError:
    message = error.message
    if isinstance(error.details, dict) and isinstance(error.details.get("error"), str):
        message = error.details["error"]
    logger.warning(f"CMS request failed while resolving GraphQL query: {error.message}")
    return GraphQLError(message, extensions={"statusCode": error.status_code or 502})


@strawberry.type
class Query:
    @strawberry.field(description="Articles from the CMS, newest first.")
    async def articles(
        self,
        info: Info,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Article]:
        client: CmsApiClient = info.context["cms_client"]
        try:
            dtos = await client.list_articles(page=page, limit=limit)
        except CmsApiError as e:
            raise _to_graphql_error(e) from e
        return [dto.to_graphql() for dto in dtos]

    @strawberry.field(description="A single article by its identifier.")
    async def article(self, info: Info, id: strawberry.ID) -> Article:
        client: CmsApiClient = info.context["cms_client"]
        try:
            dto = await client.get_article(str(id))
        except CmsApiError as e:
            raise _to_graphql_error(e) from e
        return dto.to_graphql()


schema = strawberry.Schema(query=Query)


async def get_context(cms_client: CmsApiClient = Depends(get_cms_client)) -> Dict[str, Any]:
    return {"cms_client": cms_client}


def create_graphql_router() -> GraphQLRouter:
    """Build the ``/graphql`` router (GraphiQL enabled for GET requests)."""
    return GraphQLRouter(schema, context_getter=get_context)
