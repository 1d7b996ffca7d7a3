from typing import Dict, Optional

from src.profit_tracker.storage.interface import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    def __init__(self):
        self._data: Dict[str, str] = {}

    async def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def save(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)
