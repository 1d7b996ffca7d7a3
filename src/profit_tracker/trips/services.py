import logging
import uuid
from typing import List

import pendulum

from src.profit_tracker.history.repositories import IHistoryRepository
from src.profit_tracker.history.schemas import HistoryItem
from src.profit_tracker.partners.repositories import ISettingsRepository
from src.profit_tracker.trips.exceptions import TripNotFoundException
from src.profit_tracker.trips.repositories import ITripRepository
from src.profit_tracker.trips.schemas import Trip, TripCreateDTO, TripImportDTO

logger = logging.getLogger(__name__)


class TripService:
    def __init__(
        self,
        trip_repo: ITripRepository,
        history_repo: IHistoryRepository,
        settings_repo: ISettingsRepository,
    ):
        self.trip_repo = trip_repo
        self.history_repo = history_repo
        self.settings_repo = settings_repo

    async def list_trips(self) -> List[Trip]:
        return await self.trip_repo.list_trips()

    async def add_trip(self, data: TripCreateDTO) -> Trip:
        """Manually entered trips are billed under the currently selected partner."""
        settings = await self.settings_repo.load()
        trip = Trip(
            id=f"manual_{uuid.uuid4().hex}",
            partner_id=settings.selected_partner_id,
            **data.model_dump(),
        )
        await self.trip_repo.add_many([trip])
        logger.info("Added trip %s", trip.id)
        return trip

    async def import_trips(self, data: TripImportDTO) -> HistoryItem:
        batch_id = uuid.uuid4().hex
        trips = [
            Trip(
                id=f"import_{batch_id}_{index}",
                partner_id=data.partner_id,
                **trip.model_dump(),
            )
            for index, trip in enumerate(data.trips)
        ]
        await self.trip_repo.add_many(trips)

        history_item = HistoryItem(
            id=f"hist_trips_{batch_id}",
            date=pendulum.now(),
            type="trips",
            file_name=data.file_name,
            platform=data.platform,
            trip_count=len(trips),
            related_ids=[t.id for t in trips],
        )
        await self.history_repo.add(history_item)
        logger.info(
            "Imported %d trips from %s (%s)",
            len(trips),
            data.file_name,
            data.platform.value,
        )
        return history_item

    async def delete_trip(self, trip_id: str) -> None:
        if not await self.trip_repo.delete_many([trip_id]):
            logger.warning("Trip %s not found", trip_id)
            raise TripNotFoundException(trip_id)
        logger.info("Deleted trip %s", trip_id)
