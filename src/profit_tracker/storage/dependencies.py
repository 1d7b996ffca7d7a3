from functools import lru_cache

from fastapi import Depends
from src.profit_tracker.config import get_settings
from src.profit_tracker.costs.repositories import CostRepository, ICostRepository
from src.profit_tracker.history.repositories import (
    HistoryRepository,
    IHistoryRepository,
)
from src.profit_tracker.partners.repositories import (
    ISettingsRepository,
    SettingsRepository,
)
from src.profit_tracker.storage.interface import IKeyValueStore
from src.profit_tracker.storage.memory import InMemoryKeyValueStore
from src.profit_tracker.storage.redis import RedisKeyValueStore, redis_manager
from src.profit_tracker.trips.repositories import ITripRepository, TripRepository


@lru_cache()
def get_store() -> IKeyValueStore:
    if get_settings().STORAGE_BACKEND == "redis":
        return RedisKeyValueStore(redis_manager)
    return InMemoryKeyValueStore()


def storage_key(name: str) -> str:
    return f"{get_settings().STORAGE_KEY_PREFIX}:{name}"


def get_trip_repository(
    store: IKeyValueStore = Depends(get_store),
) -> ITripRepository:
    return TripRepository(store, storage_key("trips"))


def get_cost_repository(
    store: IKeyValueStore = Depends(get_store),
) -> ICostRepository:
    return CostRepository(store, storage_key("costs"))


def get_history_repository(
    store: IKeyValueStore = Depends(get_store),
) -> IHistoryRepository:
    return HistoryRepository(store, storage_key("history"))


def get_settings_repository(
    store: IKeyValueStore = Depends(get_store),
) -> ISettingsRepository:
    return SettingsRepository(store, storage_key("settings"))
