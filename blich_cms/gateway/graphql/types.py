"""GraphQL object types exposed by the gateway."""

import strawberry


@strawberry.type(description="A CMS article as seen by the public site.")
class Article:
    id: strawberry.ID
    title: str
    content: str
    slug: str
    perex: str
    status: str
    created_at: float = strawberry.field(description="Creation time in epoch milliseconds")
    updated_at: float = strawberry.field(description="Last update time in epoch milliseconds")
