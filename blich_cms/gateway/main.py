"""
Main Application Entry Point of the API gateway.

The gateway fronts the CMS for the public site:

- ``/graphql``: GraphQL ``articles`` / ``article`` queries
- ``/api/v1/content``: pass-through proxy for games and blog posts
- ``/api/v1/profile`` and ``/api/v1/public``: token demo endpoints
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blich_cms.core.logging_config import get_logger, setup_logging
from blich_cms.core.monitoring import initialize_logfire
from blich_cms.server.middleware import RequestLoggingMiddleware

from .api import app as account
from .api import content, health
from .cms_client import CmsApiClient
from .core.config import gateway_settings
from .graphql import create_graphql_router

API_V1_STR = "/api/v1"

setup_logging(log_level=gateway_settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared CMS client at startup and close it at shutdown."""
    cms = gateway_settings.cms
    logger.info(f"Starting up Blich API gateway (CMS at {cms.url})...")
    app.state.cms_client = CmsApiClient(cms.url, timeout=cms.timeout)

    yield

    logger.info("Shutting down Blich API gateway...")
    await app.state.cms_client.aclose()


app = FastAPI(
    title="Blich API Gateway",
    description="Public API of the Blich Studio website, backed by the Blich CMS.",
    version="1.0.0",
    openapi_url=f"{API_V1_STR}/openapi.json",
    docs_url=f"{API_V1_STR}/docs",
    redoc_url=f"{API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=gateway_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

initialize_logfire("blich-gateway", app)

app.include_router(health.router, prefix=API_V1_STR, tags=["health"])
app.include_router(account.router, prefix=API_V1_STR)
app.include_router(content.router, prefix=f"{API_V1_STR}/content")
app.include_router(create_graphql_router(), prefix="/graphql", tags=["graphql"])


def run() -> None:
    """Run the gateway with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=gateway_settings.server_host, port=gateway_settings.server_port, log_config=None)
