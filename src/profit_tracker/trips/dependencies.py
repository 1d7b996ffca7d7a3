from fastapi import Depends
from src.profit_tracker.history.repositories import IHistoryRepository
from src.profit_tracker.partners.repositories import ISettingsRepository
from src.profit_tracker.storage.dependencies import (
    get_history_repository,
    get_settings_repository,
    get_trip_repository,
)
from src.profit_tracker.trips.repositories import ITripRepository
from src.profit_tracker.trips.services import TripService


def get_trip_service(
    trip_repo: ITripRepository = Depends(get_trip_repository),
    history_repo: IHistoryRepository = Depends(get_history_repository),
    settings_repo: ISettingsRepository = Depends(get_settings_repository),
) -> TripService:
    return TripService(trip_repo, history_repo, settings_repo)
