"""
Unit tests for RequestLoggingMiddleware.
"""

import logging
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from blich_cms.server.middleware import RequestLoggingMiddleware
from blich_cms.server.middleware import request_logging

pytestmark = pytest.mark.asyncio


def build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    @app.get("/fail")
    async def fail():
        raise RuntimeError("broken")

    return app


class TestRequestLoggingMiddleware:
    async def test_adds_process_time_header(self):
        async with AsyncClient(transport=ASGITransport(app=build_app()), base_url="http://testserver") as client:
            with patch.object(request_logging, "log_api_request") as log_request:
                response = await client.get("/ping")

        assert response.status_code == 200
        assert float(response.headers["x-process-time"]) >= 0
        log_request.assert_called_once()
        assert log_request.call_args.kwargs["path"] == "/ping"
        assert log_request.call_args.kwargs["status_code"] == 200

    async def test_warns_on_slow_requests(self, monkeypatch, caplog):
        monkeypatch.setattr(request_logging, "SLOW_REQUEST_MS", -1)

        async with AsyncClient(transport=ASGITransport(app=build_app()), base_url="http://testserver") as client:
            with caplog.at_level(logging.WARNING, logger=request_logging.__name__):
                await client.get("/ping")

        assert any("Slow API request: GET /ping" in record.getMessage() for record in caplog.records)

    async def test_failures_are_logged_and_reraised(self):
        transport = ASGITransport(app=build_app(), raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            with patch.object(request_logging, "log_api_request") as log_request:
                response = await client.get("/fail")

        assert response.status_code == 500
        assert log_request.call_args.kwargs["status_code"] == 500
