from abc import ABC, abstractmethod
from typing import Iterable, List

from src.profit_tracker.storage.interface import IKeyValueStore
from src.profit_tracker.storage.repositories import JsonListRepository
from src.profit_tracker.trips.schemas import Trip


class ITripRepository(ABC):
    @abstractmethod
    async def list_trips(self) -> List[Trip]: ...

    @abstractmethod
    async def add_many(self, trips: Iterable[Trip]) -> List[Trip]: ...

    @abstractmethod
    async def delete_many(self, trip_ids: Iterable[str]) -> int:
        """Remove the given trips, returning how many were found"""
        ...


class TripRepository(JsonListRepository[Trip], ITripRepository):
    def __init__(self, store: IKeyValueStore, key: str):
        super().__init__(store, key, Trip)

    async def list_trips(self) -> List[Trip]:
        return await self.load_all()

    async def add_many(self, trips: Iterable[Trip]) -> List[Trip]:
        new_trips = list(trips)
        merged = new_trips + await self.load_all()
        merged.sort(key=lambda t: t.start_time, reverse=True)
        await self.save_all(merged)
        return new_trips

    async def delete_many(self, trip_ids: Iterable[str]) -> int:
        ids = set(trip_ids)
        trips = await self.load_all()
        remaining = [t for t in trips if t.id not in ids]
        await self.save_all(remaining)
        return len(trips) - len(remaining)
