from fastapi import Depends
from src.profit_tracker.costs.repositories import ICostRepository
from src.profit_tracker.costs.services import CostService
from src.profit_tracker.history.repositories import IHistoryRepository
from src.profit_tracker.storage.dependencies import (
    get_cost_repository,
    get_history_repository,
)


def get_cost_service(
    cost_repo: ICostRepository = Depends(get_cost_repository),
    history_repo: IHistoryRepository = Depends(get_history_repository),
) -> CostService:
    return CostService(cost_repo, history_repo)
