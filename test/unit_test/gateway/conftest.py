from typing import Callable, List

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blich_cms.gateway.api.deps import get_cms_client
from blich_cms.gateway.cms_client import CmsApiClient

CMS_URL = "http://mock-cms"


class CmsStub:
    """Programmable stand-in for the CMS server behind ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.routes = {}
        self.requests: List[httpx.Request] = []

    def route(self, path: str, status_code: int = 200, json=None) -> None:
        self.routes[path] = (status_code, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"error": f"Route GET {request.url.path} not found"})
        status_code, body = self.routes[request.url.path]
        return httpx.Response(status_code, json=body)


@pytest.fixture
def cms_stub() -> CmsStub:
    return CmsStub()


@pytest.fixture
def make_cms_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], CmsApiClient]:
    def _make(handler) -> CmsApiClient:
        return CmsApiClient(CMS_URL, client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    return _make


@pytest_asyncio.fixture
async def gateway_client(cms_stub: CmsStub, make_cms_client):
    """HTTP client for the gateway app, wired to ``cms_stub`` instead of a real CMS."""
    from blich_cms.gateway.main import app

    cms_client = make_cms_client(cms_stub.handler)
    app.dependency_overrides[get_cms_client] = lambda: cms_client

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
    await cms_client.aclose()
