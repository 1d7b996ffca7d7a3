from abc import ABC, abstractmethod
from typing import List, Optional

from src.profit_tracker.history.schemas import HistoryItem
from src.profit_tracker.storage.interface import IKeyValueStore
from src.profit_tracker.storage.repositories import JsonListRepository


class IHistoryRepository(ABC):
    @abstractmethod
    async def list_items(self) -> List[HistoryItem]: ...

    @abstractmethod
    async def get(self, item_id: str) -> Optional[HistoryItem]: ...

    @abstractmethod
    async def add(self, item: HistoryItem) -> HistoryItem: ...

    @abstractmethod
    async def delete(self, item_id: str) -> bool: ...

    @abstractmethod
    async def delete_by_related_cost(self, cost_id: str) -> int:
        """Drop cost entries referencing the given cost"""
        ...


class HistoryRepository(JsonListRepository[HistoryItem], IHistoryRepository):
    def __init__(self, store: IKeyValueStore, key: str):
        super().__init__(store, key, HistoryItem)

    async def list_items(self) -> List[HistoryItem]:
        return await self.load_all()

    async def get(self, item_id: str) -> Optional[HistoryItem]:
        return next((i for i in await self.load_all() if i.id == item_id), None)

    async def add(self, item: HistoryItem) -> HistoryItem:
        items = [item] + await self.load_all()
        items.sort(key=lambda i: i.date, reverse=True)
        await self.save_all(items)
        return item

    async def delete(self, item_id: str) -> bool:
        items = await self.load_all()
        remaining = [i for i in items if i.id != item_id]
        if len(remaining) == len(items):
            return False
        await self.save_all(remaining)
        return True

    async def delete_by_related_cost(self, cost_id: str) -> int:
        items = await self.load_all()
        remaining = [
            i for i in items if i.type != "cost" or cost_id not in i.related_ids
        ]
        await self.save_all(remaining)
        return len(items) - len(remaining)
