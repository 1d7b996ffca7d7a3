from typing import List

from fastapi import APIRouter, Depends
from src.profit_tracker.analytics.dependencies import get_analytics_service
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
from src.profit_tracker.analytics.services import AnalyticsService

analytics_router = APIRouter(prefix="/analytics", tags=["Analytics"])


@analytics_router.get("/overview", response_model=PeriodStatistics)
async def get_overview(service: AnalyticsService = Depends(get_analytics_service)):
    return await service.get_overview()


@analytics_router.get("/month", response_model=MonthSummary)
async def get_month_summary(
    params: MonthRequestDTO = Depends(),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return await service.get_month_summary(params)


@analytics_router.get("/cost-breakdown", response_model=List[CostBreakdownItem])
async def get_cost_breakdown(
    service: AnalyticsService = Depends(get_analytics_service),
):
    return await service.get_cost_breakdown()


@analytics_router.get("/rollups", response_model=List[PeriodRollup])
async def get_rollups(
    params: RollupRequestDTO = Depends(),
    service: AnalyticsService = Depends(get_analytics_service),
):
    return await service.get_rollups(params)


@analytics_router.get("/hourly-profitability", response_model=HourlyProfitability)
async def get_hourly_profitability(
    service: AnalyticsService = Depends(get_analytics_service),
):
    return await service.get_hourly_profitability()


@analytics_router.get("/earnings-by-weekday", response_model=List[WeekdayEarnings])
async def get_earnings_by_weekday(
    service: AnalyticsService = Depends(get_analytics_service),
):
    return await service.get_earnings_by_weekday()
