import logging
from typing import List

from src.profit_tracker.costs.repositories import ICostRepository
from src.profit_tracker.history.exceptions import HistoryItemNotFoundException
from src.profit_tracker.history.repositories import IHistoryRepository
from src.profit_tracker.history.schemas import HistoryItem
from src.profit_tracker.trips.repositories import ITripRepository

logger = logging.getLogger(__name__)


class HistoryService:
    def __init__(
        self,
        history_repo: IHistoryRepository,
        trip_repo: ITripRepository,
        cost_repo: ICostRepository,
    ):
        self.history_repo = history_repo
        self.trip_repo = trip_repo
        self.cost_repo = cost_repo

    async def list_items(self) -> List[HistoryItem]:
        return await self.history_repo.list_items()

    async def delete_item(self, item_id: str) -> None:
        """Undo an import or a cost entry: the referenced records go with it."""
        item = await self.history_repo.get(item_id)
        if item is None:
            raise HistoryItemNotFoundException(item_id)

        if item.type == "trips":
            removed = await self.trip_repo.delete_many(item.related_ids)
            logger.info("Removed %d trip(s) of history item %s", removed, item_id)
        elif item.type == "cost" and item.related_ids:
            await self.cost_repo.delete(item.related_ids[0])
            logger.info(
                "Removed cost %s of history item %s", item.related_ids[0], item_id
            )

        await self.history_repo.delete(item_id)
