from datetime import date, timedelta
from typing import Tuple

from src.profit_tracker.analytics.strategies.interface import IPeriodRollupStrategy
from src.profit_tracker.daily_summary.utils import week_start


class WeeklyRollupStrategy(IPeriodRollupStrategy):
    def period_bounds(self, day: date) -> Tuple[date, date]:
        start = week_start(day)
        return start, start + timedelta(days=6)
