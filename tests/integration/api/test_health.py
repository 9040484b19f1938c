"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["storage_backend"] == "memory"
        assert "timestamp" in data

    @pytest.mark.asyncio
    async def test_detailed_health_checks_storage(self, client: AsyncClient) -> None:
        response = await client.get("/health/detailed")

        data = response.json()
        assert data["status"] == "healthy"
        assert data["storage"] == "healthy"
