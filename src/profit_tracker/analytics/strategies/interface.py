from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import date
from typing import Dict, List, Sequence, Tuple

from src.profit_tracker.analytics.schemas import PeriodRollup
from src.profit_tracker.daily_summary.schemas import DaySummary
from src.profit_tracker.daily_summary.utils import per_hour


class IPeriodRollupStrategy(ABC):
    @abstractmethod
    def period_bounds(self, day: date) -> Tuple[date, date]:
        """
        Return the first and last day of the period containing `day`.
        """
        ...

    async def aggregate(self, summaries: Sequence[DaySummary]) -> List[PeriodRollup]:
        data: Dict[Tuple[date, date], List[DaySummary]] = defaultdict(list)
        for summary in summaries:
            data[self.period_bounds(summary.date)].append(summary)

        results = []
        for (period_start, period_end), records in data.items():
            net_profit = sum(r.net_profit for r in records)
            work_duration_ms = sum(r.work_duration_ms for r in records)
            results.append(
                PeriodRollup(
                    period_start=period_start,
                    period_end=period_end,
                    total_revenue=sum(r.total_revenue for r in records),
                    total_costs=sum(r.total_costs for r in records),
                    net_profit=net_profit,
                    work_duration_ms=work_duration_ms,
                    profit_per_hour=per_hour(net_profit, work_duration_ms),
                    trip_count=sum(r.trip_count for r in records),
                    total_distance=sum(r.total_distance for r in records),
                    active_days=sum(1 for r in records if r.trip_count > 0),
                )
            )

        results.sort(key=lambda r: r.period_start, reverse=True)
        return results
