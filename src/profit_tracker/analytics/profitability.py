from typing import Iterable, List, Optional, Sequence

import pendulum

from src.profit_tracker.analytics.schemas import HourlyProfitability, WeekdayEarnings
from src.profit_tracker.daily_summary.schemas import DaySummary
from src.profit_tracker.daily_summary.utils import MS_PER_HOUR, duration_ms
from src.profit_tracker.trips.schemas import Trip

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _local(moment, timezone: str):
    if moment.tzinfo is None:
        return moment
    return pendulum.instance(moment).in_timezone(timezone)


def hourly_profitability(
    day_summaries: Sequence[DaySummary], timezone: str = "UTC"
) -> HourlyProfitability:
    """
    Profit per driving hour by weekday and starting hour. Only the partner
    commission is netted out; the cell is None where no trip started.
    """
    profit = [[0.0] * 24 for _ in range(7)]
    hours = [[0.0] * 24 for _ in range(7)]

    for day in day_summaries:
        partner = day.partner
        for trip in day.trips:
            trip_hours = duration_ms(trip.start_time, trip.end_time) / MS_PER_HOUR
            if trip_hours <= 0:
                continue

            commission = 0.0
            if partner is not None and partner.commission is not None:
                commission = trip.fare * (partner.commission.percentage / 100)

            start = _local(trip.start_time, timezone)
            profit[start.weekday()][start.hour] += trip.fare - commission
            hours[start.weekday()][start.hour] += trip_hours

    matrix: List[List[Optional[float]]] = [
        [
            profit[d][h] / hours[d][h] if hours[d][h] > 0 else None
            for h in range(24)
        ]
        for d in range(7)
    ]
    return HourlyProfitability(matrix=matrix)


def earnings_by_weekday(
    trips: Iterable[Trip], timezone: str = "UTC"
) -> List[WeekdayEarnings]:
    totals = [0.0] * 7
    for trip in trips:
        totals[_local(trip.start_time, timezone).weekday()] += trip.fare

    return [
        WeekdayEarnings(weekday=label, earnings=total)
        for label, total in zip(WEEKDAY_LABELS, totals)
    ]
