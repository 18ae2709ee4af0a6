from __future__ import annotations

from typing import TYPE_CHECKING, List

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from blich_cms.gateway.graphql.types import Article


class CmsSchema(BaseModel):
    """Shared base for DTOs read from the CMS.

    - Ignores unknown fields so new CMS fields never break the gateway
    - Enables populate_by_name for using either snake_case or camelCase
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", alias_generator=to_camel)


class CmsArticleDTO(CmsSchema):
    id: str = Field(alias="_id")
    title: str
    content: str
    slug: str = ""
    perex: str = ""
    status: str = "draft"
    author_id: str = ""
    tags: List[str] = Field(default_factory=list)
    created_at: float
    updated_at: float

    def to_graphql(self) -> "Article":
        """Map the CMS wire shape onto the gateway's GraphQL ``Article`` type."""
        from blich_cms.gateway.graphql.types import Article

        return Article(
            id=self.id,
            title=self.title,
            content=self.content,
            slug=self.slug,
            perex=self.perex,
            status=self.status,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class CmsArticleListPayloadDTO(CmsSchema):
    data: List[CmsArticleDTO]

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, v):
        # Accept a bare list as well as the paginated {"data": [...]} envelope
        if isinstance(v, list):
            return {"data": v}
        return v
