import logging
from abc import ABC, abstractmethod

from pydantic import ValidationError

from src.profit_tracker.partners.schemas import AppSettings
from src.profit_tracker.storage.interface import IKeyValueStore

logger = logging.getLogger(__name__)


class ISettingsRepository(ABC):
    @abstractmethod
    async def load(self) -> AppSettings: ...

    @abstractmethod
    async def save(self, settings: AppSettings) -> AppSettings: ...


class SettingsRepository(ISettingsRepository):
    def __init__(self, store: IKeyValueStore, key: str):
        self.store = store
        self.key = key

    async def load(self) -> AppSettings:
        raw = await self.store.load(self.key)
        if not raw:
            return AppSettings()
        try:
            return AppSettings.model_validate_json(raw)
        except ValidationError as e:
            logger.error("Error reading settings from storage, using defaults: %s", e)
            return AppSettings()

    async def save(self, settings: AppSettings) -> AppSettings:
        await self.store.save(self.key, settings.model_dump_json())
        return settings
