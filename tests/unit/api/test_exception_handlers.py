"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.exception_handlers import setup_exception_handlers
from core.exceptions import (
    DuplicateNicknameError,
    InvalidCredentialsError,
    InvalidProfileError,
    NotFoundError,
    WeakPasswordError,
)


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _raise_and_get(exc: Exception):
    app = _create_test_app()

    @app.get("/raise")
    async def _() -> None:
        raise exc

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get("/raise")


class TestExceptionHandlers:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("exc", "status_code", "error_code"),
        [
            (DuplicateNicknameError("alice"), 409, "DUPLICATE_NICKNAME"),
            (WeakPasswordError(8), 400, "WEAK_PASSWORD"),
            (InvalidCredentialsError(), 401, "INVALID_CREDENTIALS"),
            (NotFoundError("some-id"), 404, "USER_NOT_FOUND"),
            (InvalidProfileError("plan"), 400, "INVALID_PROFILE"),
        ],
    )
    async def test_app_exception_maps_to_status_and_code(
        self, exc: Exception, status_code: int, error_code: str
    ) -> None:
        response = await _raise_and_get(exc)

        assert response.status_code == status_code
        assert response.json()["error_code"] == error_code

    @pytest.mark.asyncio
    async def test_not_found_carries_details(self) -> None:
        response = await _raise_and_get(NotFoundError("some-id"))

        body = response.json()
        assert "some-id" in body["message"]
        assert body["details"]["user_id"] == "some-id"

    @pytest.mark.asyncio
    async def test_validation_error_returns_field_details(self) -> None:
        from pydantic import BaseModel, Field

        app = _create_test_app()

        class Body(BaseModel):
            nickname: str = Field(..., min_length=1)

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"nickname": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.nickname"

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self) -> None:
        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        handler = app.exception_handlers.get(Exception)
        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, RuntimeError("Something went wrong"))  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["details"]["request_id"] == "test-req-id"
