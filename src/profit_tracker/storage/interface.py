from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    @abstractmethod
    async def load(self, key: str) -> Optional[str]:
        """Return the stored blob, or None when the key was never saved"""
        ...

    @abstractmethod
    async def save(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def delete(self, key: str) -> None: ...
