"""
Unit Tests for Error Handling Middleware

Tests for:
- Service exception status codes and error codes
- The standard error body produced by the app
- handle_endpoint_errors wrapping unexpected failures
"""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from app.middleware.error_handling import (
    LLMError,
    NotFoundError,
    QuotaExceededError,
    RateLimitError,
    ServiceError,
    ValidationError,
    handle_endpoint_errors,
    setup_error_handling,
)


class TestServiceExceptions:
    @pytest.mark.parametrize(
        "exc_class,status_code,error_code",
        [
            pytest.param(ServiceError, 500, "service_error", id="service"),
            pytest.param(LLMError, 502, "llm_error", id="llm"),
            pytest.param(RateLimitError, 429, "rate_limit_exceeded", id="rate_limit"),
            pytest.param(QuotaExceededError, 402, "quota_exceeded", id="quota"),
            pytest.param(ValidationError, 422, "validation_error", id="validation"),
            pytest.param(NotFoundError, 404, "not_found", id="not_found"),
        ],
    )
    def test_class_defaults(self, exc_class, status_code: int, error_code: str) -> None:
        exc = exc_class("boom")
        assert exc.status_code == status_code
        assert exc.error_code == error_code
        assert exc.message == "boom"

    def test_overrides(self) -> None:
        exc = ServiceError("db down", status_code=503, error_code="db_unavailable")
        assert exc.status_code == 503
        assert exc.error_code == "db_unavailable"


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    setup_error_handling(app, debug=False)

    @app.get("/quota")
    @handle_endpoint_errors("Quota check")
    async def quota():
        raise QuotaExceededError("no credits")

    @app.get("/http")
    @handle_endpoint_errors("HTTP check")
    async def http():
        raise HTTPException(status_code=418, detail="teapot")

    @app.get("/crash")
    @handle_endpoint_errors("Crash check")
    async def crash():
        raise KeyError("missing")

    @app.get("/ok")
    @handle_endpoint_errors("Ok check")
    async def ok():
        return {"fine": True}

    return TestClient(app)


class TestErrorResponses:
    def test_service_error_body(self, client) -> None:
        response = client.get("/quota")
        body = response.json()

        assert response.status_code == 402
        assert body["error"] == "quota_exceeded"
        assert body["message"] == "no credits"
        assert len(body["error_id"]) == 8
        assert "timestamp" in body

    def test_http_exception_passes_through(self, client) -> None:
        response = client.get("/http")
        assert response.status_code == 418
        assert response.json() == {"detail": "teapot"}

    def test_unexpected_error_sanitized(self, client) -> None:
        response = client.get("/crash")
        body = response.json()

        assert response.status_code == 500
        assert body["error"] == "service_error"
        assert body["message"] == "Crash check failed"
        assert "missing" not in response.text

    def test_success_untouched(self, client) -> None:
        assert client.get("/ok").json() == {"fine": True}
