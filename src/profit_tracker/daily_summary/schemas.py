from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field

from src.profit_tracker.costs.schemas import Cost
from src.profit_tracker.daily_summary.utils import format_duration
from src.profit_tracker.partners.schemas import DailyRecurringCost, Partner
from src.profit_tracker.trips.schemas import Trip


class DayActivity(BaseModel):
    trips: List[Trip] = []
    costs: List[Cost] = []


class DaySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    work_duration_ms: int = 0
    total_revenue: float = 0.0
    total_costs: float = 0.0
    net_profit: float = 0.0
    profit_per_hour: float = 0.0
    trip_count: int = 0
    total_distance: float = 0.0
    trips: List[Trip] = []
    incidental_costs: List[Cost] = []
    partner: Optional[Partner] = None
    applied_daily_cost: Optional[DailyRecurringCost] = None
    applied_rental_cost: float = 0.0
    fixed_cost_amount: float = 0.0
    commission_amount: float = 0.0
    daily_recurring_amount: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return self.date.isoformat()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def work_duration_label(self) -> str:
        return format_duration(self.work_duration_ms)
