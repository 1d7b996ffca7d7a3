import logging
from typing import List

from src.profit_tracker.costs.repositories import ICostRepository
from src.profit_tracker.daily_summary.aggregator import DailyAggregator
from src.profit_tracker.daily_summary.schemas import DaySummary
from src.profit_tracker.partners.registry import PartnerRegistry
from src.profit_tracker.partners.repositories import ISettingsRepository
from src.profit_tracker.storage.exceptions import StorageUnavailableException
from src.profit_tracker.trips.repositories import ITripRepository

logger = logging.getLogger(__name__)


class DaySummaryService:
    def __init__(
        self,
        trip_repo: ITripRepository,
        cost_repo: ICostRepository,
        settings_repo: ISettingsRepository,
        aggregator: DailyAggregator,
    ):
        self.trip_repo = trip_repo
        self.cost_repo = cost_repo
        self.settings_repo = settings_repo
        self.aggregator = aggregator

    async def get_day_summaries(self) -> List[DaySummary]:
        try:
            # Snapshot all inputs before handing them to the aggregator
            trips = await self.trip_repo.list_trips()
            costs = await self.cost_repo.list_costs()
            registry = PartnerRegistry.from_settings(await self.settings_repo.load())

            return self.aggregator.build_summaries(trips, costs, registry)

        except StorageUnavailableException:
            raise

        except ValueError as e:
            logger.warning(
                "Validation error while building day summaries: %s",
                str(e),
                exc_info=True,
            )
            raise

        except Exception as e:
            logger.error(
                "Unexpected error while building day summaries: %s",
                str(e),
                exc_info=True,
            )
            raise RuntimeError(
                "Unexpected error during day summary aggregation."
            ) from e
