from fastapi import Depends
from src.profit_tracker.config import get_settings
from src.profit_tracker.costs.repositories import ICostRepository
from src.profit_tracker.daily_summary.aggregator import DailyAggregator
from src.profit_tracker.daily_summary.fixed_costs import ProratedFixedCostCalculator
from src.profit_tracker.daily_summary.fuel import DailyDistanceFuelEstimator
from src.profit_tracker.daily_summary.rental import WeeklyRentalAllocator
from src.profit_tracker.daily_summary.services import DaySummaryService
from src.profit_tracker.partners.repositories import ISettingsRepository
from src.profit_tracker.storage.dependencies import (
    get_cost_repository,
    get_settings_repository,
    get_trip_repository,
)
from src.profit_tracker.trips.repositories import ITripRepository


def get_fixed_cost_calculator() -> ProratedFixedCostCalculator:
    return ProratedFixedCostCalculator(
        monthly_divisor_days=get_settings().MONTHLY_RENTAL_DIVISOR_DAYS
    )


def get_daily_aggregator(
    fixed_cost_calculator: ProratedFixedCostCalculator = Depends(
        get_fixed_cost_calculator
    ),
) -> DailyAggregator:
    settings = get_settings()
    return DailyAggregator(
        fixed_cost_calculator=fixed_cost_calculator,
        rental_allocator=WeeklyRentalAllocator(),
        fuel_estimator=DailyDistanceFuelEstimator(
            estimated_daily_distance_km=settings.ESTIMATED_DAILY_DISTANCE_KM
        ),
        timezone=settings.TIMEZONE,
    )


def get_day_summary_service(
    trip_repo: ITripRepository = Depends(get_trip_repository),
    cost_repo: ICostRepository = Depends(get_cost_repository),
    settings_repo: ISettingsRepository = Depends(get_settings_repository),
    aggregator: DailyAggregator = Depends(get_daily_aggregator),
) -> DaySummaryService:
    return DaySummaryService(trip_repo, cost_repo, settings_repo, aggregator)
