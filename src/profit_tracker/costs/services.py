import logging
import uuid
from typing import List

import pendulum

from src.profit_tracker.config import get_settings
from src.profit_tracker.costs.exceptions import CostNotFoundException
from src.profit_tracker.costs.repositories import ICostRepository
from src.profit_tracker.costs.schemas import Cost, CostCreateDTO
from src.profit_tracker.history.repositories import IHistoryRepository
from src.profit_tracker.history.schemas import HistoryItem

logger = logging.getLogger(__name__)


class CostService:
    def __init__(self, cost_repo: ICostRepository, history_repo: IHistoryRepository):
        self.cost_repo = cost_repo
        self.history_repo = history_repo

    async def list_costs(self) -> List[Cost]:
        return await self.cost_repo.list_costs()

    async def add_cost(self, data: CostCreateDTO) -> Cost:
        cost = Cost(id=f"cost_{uuid.uuid4().hex}", **data.model_dump())
        await self.cost_repo.add(cost)

        cost_day = cost.date
        await self.history_repo.add(
            HistoryItem(
                id=f"hist_cost_{cost.id}",
                date=pendulum.datetime(
                    cost_day.year,
                    cost_day.month,
                    cost_day.day,
                    tz=get_settings().TIMEZONE,
                ),
                type="cost",
                description=cost.description or cost.category.value,
                amount=cost.amount,
                related_ids=[cost.id],
            )
        )
        logger.info("Added cost %s (%s)", cost.id, cost.category.value)
        return cost

    async def delete_cost(self, cost_id: str) -> None:
        """Delete a cost together with the history entries that reference it."""
        if not await self.cost_repo.delete(cost_id):
            logger.warning("Cost %s not found", cost_id)
            raise CostNotFoundException(cost_id)
        removed = await self.history_repo.delete_by_related_cost(cost_id)
        logger.info("Deleted cost %s and %d history item(s)", cost_id, removed)
