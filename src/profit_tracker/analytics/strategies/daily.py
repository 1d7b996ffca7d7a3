from datetime import date
from typing import Tuple

from src.profit_tracker.analytics.strategies.interface import IPeriodRollupStrategy


class DailyRollupStrategy(IPeriodRollupStrategy):
    def period_bounds(self, day: date) -> Tuple[date, date]:
        return day, day
