from fastapi import Depends
from src.profit_tracker.costs.repositories import ICostRepository
from src.profit_tracker.history.repositories import IHistoryRepository
from src.profit_tracker.history.services import HistoryService
from src.profit_tracker.storage.dependencies import (
    get_cost_repository,
    get_history_repository,
    get_trip_repository,
)
from src.profit_tracker.trips.repositories import ITripRepository


def get_history_service(
    history_repo: IHistoryRepository = Depends(get_history_repository),
    trip_repo: ITripRepository = Depends(get_trip_repository),
    cost_repo: ICostRepository = Depends(get_cost_repository),
) -> HistoryService:
    return HistoryService(history_repo, trip_repo, cost_repo)
