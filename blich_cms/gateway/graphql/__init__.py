"""GraphQL layer of the gateway (Strawberry)."""

from .schema import create_graphql_router, schema
from .types import Article

__all__ = ["Article", "create_graphql_router", "schema"]
