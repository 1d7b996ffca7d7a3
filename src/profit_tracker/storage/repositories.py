import logging
from typing import Generic, List, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from src.profit_tracker.storage.interface import IKeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class JsonListRepository(Generic[T]):
    """A list of records persisted as a single JSON blob under one key."""

    def __init__(self, store: IKeyValueStore, key: str, model: Type[T]):
        self.store = store
        self.key = key
        self._adapter = TypeAdapter(List[model])  # type: ignore[valid-type]

    async def load_all(self) -> List[T]:
        raw = await self.store.load(self.key)
        if not raw:
            return []
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(
                "Error reading %s from storage, starting empty: %s", self.key, e
            )
            return []

    async def save_all(self, items: Sequence[T]) -> None:
        await self.store.save(self.key, self._adapter.dump_json(list(items)).decode())
