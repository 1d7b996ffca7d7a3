from unittest.mock import AsyncMock, patch

from fastapi import FastAPI
from src.profit_tracker.config import Settings
from src.profit_tracker.main import app, lifespan
from tests.mocks.config_mocks import VALID_SETTINGS_DATA


def test_api_routes_are_mounted():
    paths = {route.path for route in app.routes}

    assert "/health" in paths
    for path in (
        "/api/trips",
        "/api/trips/import",
        "/api/costs",
        "/api/history",
        "/api/partners",
        "/api/partners/active",
        "/api/settings",
        "/api/day-summaries",
        "/api/analytics/overview",
        "/api/analytics/rollups",
        "/api/exports/trips.csv",
    ):
        assert path in paths


@patch("src.profit_tracker.main.redis_manager.close_redis", new_callable=AsyncMock)
@patch("src.profit_tracker.main.redis_manager.init_redis", new_callable=AsyncMock)
async def test_lifespan_memory_backend_skips_redis(mock_init_redis, mock_close_redis):
    async with lifespan(FastAPI()):
        mock_init_redis.assert_not_awaited()

    mock_close_redis.assert_not_awaited()


@patch("src.profit_tracker.main.redis_manager.close_redis", new_callable=AsyncMock)
@patch("src.profit_tracker.main.redis_manager.init_redis", new_callable=AsyncMock)
async def test_lifespan_redis_backend(mock_init_redis, mock_close_redis, monkeypatch):
    monkeypatch.setattr(
        "src.profit_tracker.main.get_settings",
        lambda: Settings(**{**VALID_SETTINGS_DATA, "STORAGE_BACKEND": "redis"}),
    )

    async with lifespan(FastAPI()):
        mock_init_redis.assert_awaited_once()

    # teardown
    mock_close_redis.assert_awaited_once()


async def test_openapi_schema_lists_routes(async_client):
    response = await async_client.get("/openapi.json")
    assert response.status_code == 200
    assert "/api/day-summaries" in response.json()["paths"]
