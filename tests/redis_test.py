from unittest.mock import AsyncMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.profit_tracker.storage.exceptions import StorageUnavailableException
from src.profit_tracker.storage.redis import RedisKeyValueStore, RedisManager


@pytest.fixture
def manager():
    manager = RedisManager()
    manager.redis_client = AsyncMock()
    return manager


async def test_load_reads_key(manager):
    manager.redis_client.get.return_value = '[{"id": "x"}]'
    store = RedisKeyValueStore(manager)

    assert await store.load("test-tracker:trips") == '[{"id": "x"}]'
    manager.redis_client.get.assert_awaited_once_with("test-tracker:trips")


async def test_save_and_delete(manager):
    store = RedisKeyValueStore(manager)

    await store.save("test-tracker:costs", "[]")
    await store.delete("test-tracker:costs")

    manager.redis_client.set.assert_awaited_once_with("test-tracker:costs", "[]")
    manager.redis_client.delete.assert_awaited_once_with("test-tracker:costs")


async def test_uninitialized_client_is_unavailable():
    store = RedisKeyValueStore(RedisManager())

    with pytest.raises(StorageUnavailableException) as exc_info:
        await store.load("test-tracker:trips")
    assert exc_info.value.status_code == 503


async def test_redis_error_is_unavailable(manager):
    manager.redis_client.set.side_effect = RedisConnectionError("connection refused")
    store = RedisKeyValueStore(manager)

    with pytest.raises(StorageUnavailableException) as exc_info:
        await store.save("test-tracker:trips", "[]")
    assert "connection refused" in exc_info.value.detail


@patch("src.profit_tracker.storage.redis.get_settings")
@patch("src.profit_tracker.storage.redis.redis.Redis", new_callable=AsyncMock)
async def test_init_redis(mock_redis_class, mock_get_settings):
    mock_get_settings.return_value.REDIS_HOST = "localhost"
    mock_get_settings.return_value.REDIS_PORT = 6379

    manager = RedisManager()
    await manager.init_redis()

    mock_redis_class.assert_awaited_once_with(
        host="localhost", port=6379, encoding="utf-8", decode_responses=True
    )
    assert manager.redis_client is not None


async def test_close_redis():
    mock_client = AsyncMock()
    manager = RedisManager()
    manager.redis_client = mock_client

    await manager.close_redis()

    mock_client.aclose.assert_awaited_once()
    assert manager.redis_client is None
