from abc import ABC, abstractmethod
from typing import List

from src.profit_tracker.costs.schemas import Cost
from src.profit_tracker.storage.interface import IKeyValueStore
from src.profit_tracker.storage.repositories import JsonListRepository


class ICostRepository(ABC):
    @abstractmethod
    async def list_costs(self) -> List[Cost]: ...

    @abstractmethod
    async def add(self, cost: Cost) -> Cost: ...

    @abstractmethod
    async def delete(self, cost_id: str) -> bool: ...


class CostRepository(JsonListRepository[Cost], ICostRepository):
    def __init__(self, store: IKeyValueStore, key: str):
        super().__init__(store, key, Cost)

    async def list_costs(self) -> List[Cost]:
        return await self.load_all()

    async def add(self, cost: Cost) -> Cost:
        costs = [cost] + await self.load_all()
        costs.sort(key=lambda c: c.date, reverse=True)
        await self.save_all(costs)
        return cost

    async def delete(self, cost_id: str) -> bool:
        costs = await self.load_all()
        remaining = [c for c in costs if c.id != cost_id]
        if len(remaining) == len(costs):
            return False
        await self.save_all(remaining)
        return True
