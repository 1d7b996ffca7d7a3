from datetime import date, timedelta
from typing import Tuple

from src.profit_tracker.analytics.strategies.interface import IPeriodRollupStrategy


class MonthlyRollupStrategy(IPeriodRollupStrategy):
    def _get_month_start(self, d: date) -> date:
        return date(d.year, d.month, 1)

    def _get_month_end(self, start: date) -> date:
        if start.month == 12:
            return date(start.year + 1, 1, 1) - timedelta(days=1)
        return date(start.year, start.month + 1, 1) - timedelta(days=1)

    def period_bounds(self, day: date) -> Tuple[date, date]:
        start = self._get_month_start(day)
        return start, self._get_month_end(start)
