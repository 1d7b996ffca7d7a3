import logging
from datetime import date
from typing import List, Optional

import pendulum

from src.profit_tracker.analytics.breakdown import CategoryCostBreakdown
from src.profit_tracker.analytics.period import PeriodAggregator
from src.profit_tracker.analytics.profitability import (
    earnings_by_weekday,
    hourly_profitability,
)
from src.profit_tracker.analytics.schemas import (
    CostBreakdownItem,
    HourlyProfitability,
    MonthRequestDTO,
    MonthSummary,
    PeriodRollup,
    PeriodStatistics,
    RollupRequestDTO,
    WeekdayEarnings,
)
from src.profit_tracker.analytics.strategies.factory import (
    PeriodRollupStrategyFactory,
)
from src.profit_tracker.daily_summary.services import DaySummaryService
from src.profit_tracker.storage.exceptions import StorageUnavailableException

logger = logging.getLogger(__name__)


class AnalyticsService:
    def __init__(
        self,
        day_summary_service: DaySummaryService,
        period_aggregator: PeriodAggregator,
        cost_breakdown: CategoryCostBreakdown,
        timezone: str = "UTC",
    ):
        self.day_summary_service = day_summary_service
        self.period_aggregator = period_aggregator
        self.cost_breakdown = cost_breakdown
        self.timezone = timezone

    def _today(self) -> date:
        return pendulum.today(self.timezone).date()

    async def get_overview(self, today: Optional[date] = None) -> PeriodStatistics:
        summaries = await self.day_summary_service.get_day_summaries()
        return self.period_aggregator.aggregate(summaries, today or self._today())

    async def get_month_summary(self, params: MonthRequestDTO) -> MonthSummary:
        today = self._today()
        year = params.year or today.year
        month = params.month or today.month
        summaries = await self.day_summary_service.get_day_summaries()
        return self.period_aggregator.summarize_month(summaries, year, month)

    async def get_cost_breakdown(self) -> List[CostBreakdownItem]:
        summaries = await self.day_summary_service.get_day_summaries()
        return self.cost_breakdown.breakdown(summaries)

    async def get_rollups(self, params: RollupRequestDTO) -> List[PeriodRollup]:
        try:
            summaries = await self.day_summary_service.get_day_summaries()

            # Aggregate data based on requested strategy
            strategy = PeriodRollupStrategyFactory.create(
                granularity=params.granularity
            )
            return await strategy.aggregate(summaries)

        except (StorageUnavailableException, RuntimeError):
            raise

        except ValueError as e:
            logger.warning(
                "Validation error in period rollup: %s", str(e), exc_info=True
            )
            raise

        except Exception as e:
            logger.error(
                "Unexpected error during period rollup: %s", str(e), exc_info=True
            )
            raise RuntimeError("Unexpected error during period rollup.") from e

    async def get_hourly_profitability(self) -> HourlyProfitability:
        summaries = await self.day_summary_service.get_day_summaries()
        return hourly_profitability(summaries, self.timezone)

    async def get_earnings_by_weekday(self) -> List[WeekdayEarnings]:
        summaries = await self.day_summary_service.get_day_summaries()
        trips = [trip for summary in summaries for trip in summary.trips]
        return earnings_by_weekday(trips, self.timezone)
