from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from src.profit_tracker.analytics.enums import Granularity


class PeriodStatistics(BaseModel):
    total_revenue: float
    total_costs: float
    net_profit: float
    total_work_time_ms: int
    profit_per_hour: float
    revenue_comparison: float
    costs_comparison: float
    profit_comparison: float
    revenue_trend: List[float]
    costs_trend: List[float]
    profit_trend: List[float]


class PeriodMetrics(BaseModel):
    revenue: float = 0.0
    costs: float = 0.0
    profit: float = 0.0


class MonthSummary(BaseModel):
    year: int
    month: int
    total_revenue: float
    total_costs: float
    net_profit: float


class MonthRequestDTO(BaseModel):
    year: Optional[int] = Field(None, ge=2000, le=2100)
    month: Optional[int] = Field(None, ge=1, le=12)


class CostBreakdownItem(BaseModel):
    label: str
    amount: float


class RollupRequestDTO(BaseModel):
    granularity: Granularity = Field(
        Granularity.weekly, description="Granularity (daily, weekly, or monthly)"
    )


class PeriodRollup(BaseModel):
    period_start: date
    period_end: date
    total_revenue: float
    total_costs: float
    net_profit: float
    work_duration_ms: int
    profit_per_hour: float
    trip_count: int
    total_distance: float
    active_days: int


class HourlyProfitability(BaseModel):
    # rows are weekdays (Monday first), columns hours 0-23
    matrix: List[List[Optional[float]]]


class WeekdayEarnings(BaseModel):
    weekday: str
    earnings: float
