from datetime import date, timedelta
from typing import Callable, List, Sequence

from src.profit_tracker.analytics.schemas import (
    MonthSummary,
    PeriodMetrics,
    PeriodStatistics,
)
from src.profit_tracker.daily_summary.schemas import DaySummary
from src.profit_tracker.daily_summary.utils import per_hour


def compare(current: float, previous: float) -> float:
    """
    Percentage change from previous to current.

    A zero baseline gives +100 for any positive current value and 0
    otherwise; dropping to zero from a positive baseline gives -100.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    if current == 0 and previous > 0:
        return -100.0
    return (current - previous) / previous * 100


def metrics_for_period(
    day_summaries: Sequence[DaySummary], start: date, end: date
) -> PeriodMetrics:
    metrics = PeriodMetrics()
    for summary in day_summaries:
        if start <= summary.date <= end:
            metrics.revenue += summary.total_revenue
            metrics.costs += summary.total_costs
            metrics.profit += summary.net_profit
    return metrics


class PeriodAggregator:
    def __init__(self, trend_window_days: int = 7):
        self.trend_window_days = trend_window_days

    def aggregate(
        self, day_summaries: Sequence[DaySummary], today: date
    ) -> PeriodStatistics:
        total_revenue = sum(s.total_revenue for s in day_summaries)
        total_costs = sum(s.total_costs for s in day_summaries)
        net_profit = sum(s.net_profit for s in day_summaries)
        total_work_time_ms = sum(s.work_duration_ms for s in day_summaries)

        yesterday = today - timedelta(days=1)
        today_metrics = metrics_for_period(day_summaries, today, today)
        yesterday_metrics = metrics_for_period(day_summaries, yesterday, yesterday)

        window = [
            today - timedelta(days=offset)
            for offset in reversed(range(self.trend_window_days))
        ]

        def trend(select: Callable[[PeriodMetrics], float]) -> List[float]:
            return [
                select(metrics_for_period(day_summaries, day, day)) for day in window
            ]

        return PeriodStatistics(
            total_revenue=total_revenue,
            total_costs=total_costs,
            net_profit=net_profit,
            total_work_time_ms=total_work_time_ms,
            profit_per_hour=per_hour(net_profit, total_work_time_ms),
            revenue_comparison=compare(
                today_metrics.revenue, yesterday_metrics.revenue
            ),
            costs_comparison=compare(today_metrics.costs, yesterday_metrics.costs),
            profit_comparison=compare(today_metrics.profit, yesterday_metrics.profit),
            revenue_trend=trend(lambda m: m.revenue),
            costs_trend=trend(lambda m: m.costs),
            profit_trend=trend(lambda m: m.profit),
        )

    def summarize_month(
        self, day_summaries: Sequence[DaySummary], year: int, month: int
    ) -> MonthSummary:
        monthly = [
            s for s in day_summaries if s.date.year == year and s.date.month == month
        ]
        return MonthSummary(
            year=year,
            month=month,
            total_revenue=sum(s.total_revenue for s in monthly),
            total_costs=sum(s.total_costs for s in monthly),
            net_profit=sum(s.net_profit for s in monthly),
        )
