import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from src.profit_tracker.config import get_settings
from src.profit_tracker.storage.exceptions import StorageUnavailableException
from src.profit_tracker.storage.interface import IKeyValueStore

logger = logging.getLogger(__name__)


class RedisManager:
    def __init__(self):
        self.redis_client = None

    async def init_redis(self):
        """Initialize Redis connection"""
        self.redis_client = await redis.Redis(
            host=get_settings().REDIS_HOST,
            port=get_settings().REDIS_PORT,
            encoding="utf-8",
            decode_responses=True,
        )
        logger.info("Redis connection initialized")

    async def close_redis(self):
        """Close Redis connection"""
        if self.redis_client:
            await self.redis_client.aclose()
            logger.info("Redis connection closed")
            self.redis_client = None


redis_manager = RedisManager()


class RedisKeyValueStore(IKeyValueStore):
    def __init__(self, manager: RedisManager = redis_manager):
        self.manager = manager

    def _client(self):
        if self.manager.redis_client is None:
            logger.error("Redis client is not initialized")
            raise StorageUnavailableException()
        return self.manager.redis_client

    async def load(self, key: str) -> Optional[str]:
        try:
            return await self._client().get(key)
        except RedisError as e:
            logger.error("Failed to load %s from Redis: %s", key, str(e))
            raise StorageUnavailableException(str(e)) from e

    async def save(self, key: str, value: str) -> None:
        try:
            await self._client().set(key, value)
            logger.info(f"Saved key: {key}")
        except RedisError as e:
            logger.error("Failed to save %s to Redis: %s", key, str(e))
            raise StorageUnavailableException(str(e)) from e

    async def delete(self, key: str) -> None:
        try:
            await self._client().delete(key)
        except RedisError as e:
            logger.error("Failed to delete %s from Redis: %s", key, str(e))
            raise StorageUnavailableException(str(e)) from e
