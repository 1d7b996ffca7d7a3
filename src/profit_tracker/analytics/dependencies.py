from fastapi import Depends
from src.profit_tracker.analytics.breakdown import CategoryCostBreakdown
from src.profit_tracker.analytics.period import PeriodAggregator
from src.profit_tracker.analytics.services import AnalyticsService
from src.profit_tracker.config import get_settings
from src.profit_tracker.daily_summary.dependencies import (
    get_day_summary_service,
    get_fixed_cost_calculator,
)
from src.profit_tracker.daily_summary.fixed_costs import ProratedFixedCostCalculator
from src.profit_tracker.daily_summary.services import DaySummaryService


def get_analytics_service(
    day_summary_service: DaySummaryService = Depends(get_day_summary_service),
    fixed_cost_calculator: ProratedFixedCostCalculator = Depends(
        get_fixed_cost_calculator
    ),
) -> AnalyticsService:
    settings = get_settings()
    return AnalyticsService(
        day_summary_service=day_summary_service,
        period_aggregator=PeriodAggregator(
            trend_window_days=settings.TREND_WINDOW_DAYS
        ),
        cost_breakdown=CategoryCostBreakdown(fixed_cost_calculator),
        timezone=settings.TIMEZONE,
    )
