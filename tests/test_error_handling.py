from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI, status
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from pymongo.errors import DuplicateKeyError

from tasktracker.app.core.logging import RequestContextFilter
from tasktracker.app.errors import ApplicationError, ConflictError, NotFoundError


async def test_application_error_response_schema(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/application")
    async def trigger_application_error() -> None:  # pragma: no cover - defined in test
        raise ApplicationError(
            "Example failure",
            code="example_error",
            status_code=status.HTTP_418_IM_A_TEAPOT,
            details={"foo": "bar"},
        )

    response = await client.get("/error/application")

    assert response.status_code == status.HTTP_418_IM_A_TEAPOT
    request_id = response.headers["X-Request-ID"]
    assert response.json() == {
        "error": "Example failure",
        "code": "example_error",
        "details": {"foo": "bar", "request_id": request_id},
    }


async def test_incoming_request_id_is_echoed(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/missing")
    async def trigger_not_found() -> None:  # pragma: no cover - defined in test
        raise NotFoundError("Task not found")

    response = await client.get("/error/missing", headers={"X-Request-ID": "req-123"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.headers["X-Request-ID"] == "req-123"
    assert response.json() == {
        "error": "Task not found",
        "code": "not_found",
        "details": {"request_id": "req-123"},
    }


async def test_validation_error_maps_to_bad_request(app: FastAPI, client: AsyncClient) -> None:
    class ExamplePayload(BaseModel):
        name: str

    @app.post("/error/validation")
    async def create_item(_: ExamplePayload) -> None:  # pragma: no cover - defined in test
        return None

    response = await client.post("/error/validation", json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["error"] == "Request validation failed."
    assert payload["details"]["errors"]
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_unknown_route_keeps_status(client: AsyncClient) -> None:
    response = await client.get("/error/not-found")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    payload = response.json()
    assert payload["code"] == "not_found"
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_duplicate_key_maps_to_conflict(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/duplicate")
    async def trigger_duplicate() -> None:  # pragma: no cover - defined in test
        raise DuplicateKeyError("E11000 duplicate key error")

    response = await client.get("/error/duplicate")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == ConflictError.default_code
    assert "E11000" not in response.text


async def test_unhandled_error_hides_internal_details(app: FastAPI) -> None:
    @app.get("/error/unhandled")
    async def trigger_unhandled_error() -> None:  # pragma: no cover - defined in test
        raise RuntimeError("Sensitive detail")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/error/unhandled")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    payload = response.json()
    assert payload["code"] == "server_error"
    assert payload["error"] == "Internal server error."
    assert "Sensitive" not in response.text


async def test_unhandled_error_exposes_message_when_enabled(app: FastAPI) -> None:
    app.state.settings = app.state.settings.model_copy(update={"expose_error_details": True})

    @app.get("/error/exposed")
    async def trigger_exposed_error() -> None:  # pragma: no cover - defined in test
        raise RuntimeError("Boom with context")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/error/exposed")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["error"] == "Boom with context"


class _InMemoryHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def captured_records():
    logger = logging.getLogger("tests.error_handling")
    handler = _InMemoryHandler()
    handler.addFilter(RequestContextFilter())
    logger.addHandler(handler)
    original_level = logger.level
    logger.setLevel(logging.INFO)
    try:
        yield logger, handler.records
    finally:
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()


async def test_request_id_attached_to_logs(app: FastAPI, client: AsyncClient, captured_records) -> None:
    logger, records = captured_records

    @app.get("/log")
    async def emit_log() -> dict[str, str]:  # pragma: no cover - defined in test
        logger.info("Log entry")
        return {"status": "ok"}

    response = await client.get("/log")

    request_id = response.headers["X-Request-ID"]
    matching = [record for record in records if record.getMessage() == "Log entry"]
    assert matching
    assert getattr(matching[0], "request_id", None) == request_id


async def test_health_and_metadata(client: AsyncClient) -> None:
    health = await client.get("/healthz")
    assert health.json() == {"status": "ok"}

    metadata = await client.get("/api/metadata")
    assert metadata.status_code == 200
    assert metadata.json()["environment"] == "test"
    assert metadata.json()["api_prefix"] == "/api"
