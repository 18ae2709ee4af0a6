"""
Main Application Entry Point of the CMS server.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers and includes all API routers:

- ``/api/v1/cms``: article API consumed by the API gateway
- ``/api/cms``: public site content (games, blog, studio)
- ``/api/cms/admin``: authenticated content management
- ``/api/auth``: admin login
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blich_cms.core.database import engine, init_db
from blich_cms.core.logging_config import get_logger, setup_logging
from blich_cms.core.monitoring import initialize_logfire

from .api.v1 import articles, auth, blog_posts, games, health, studio
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the schema on SQLite (or checks connectivity elsewhere) at startup
    and disposes of the connection pool at shutdown.
    """
    try:
        logger.info("Starting up Blich CMS server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down Blich CMS server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Blich CMS API

    Content storage for the Blich Studio website: articles, showcased games,
    blog posts and the studio profile, plus the admin API that manages them.
    """,
    version="1.0.0",
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)
initialize_logfire("blich-cms", app)

app.include_router(health.router, prefix=constant.CMS_API_V1_STR, tags=["health"])
app.include_router(articles.router, prefix=constant.CMS_API_V1_STR)

app.include_router(games.router, prefix=constant.CMS_CONTENT_STR)
app.include_router(blog_posts.router, prefix=constant.CMS_CONTENT_STR)
app.include_router(studio.router, prefix=constant.CMS_CONTENT_STR)

app.include_router(games.admin_router, prefix=constant.CMS_ADMIN_STR)
app.include_router(blog_posts.admin_router, prefix=constant.CMS_ADMIN_STR)
app.include_router(studio.admin_router, prefix=constant.CMS_ADMIN_STR)

app.include_router(auth.router, prefix=constant.AUTH_STR)


def run() -> None:
    """Run the CMS server with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
