"""
Gateway Dependencies.

The shared ``CmsApiClient`` lives on ``app.state`` for the lifetime of the
application; endpoints receive it through dependency injection so tests can
override it.
"""

from typing import Annotated

from fastapi import Depends, Request

from blich_cms.gateway.cms_client import CmsApiClient


def get_cms_client(request: Request) -> CmsApiClient:
    return request.app.state.cms_client


CmsClientDep = Annotated[CmsApiClient, Depends(get_cms_client)]
