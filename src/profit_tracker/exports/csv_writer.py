import csv
import io
from typing import Iterable

from src.profit_tracker.costs.schemas import Cost
from src.profit_tracker.trips.schemas import Trip

TRIP_HEADERS = [
    "ID",
    "Platform",
    "Distance (km)",
    "Fare",
    "Start time",
    "End time",
    "Partner ID",
]
COST_HEADERS = ["ID", "Amount", "Date", "Category", "Description"]


def _write(headers, rows) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue()


def trips_to_csv(trips: Iterable[Trip]) -> str:
    return _write(
        TRIP_HEADERS,
        (
            [
                trip.id,
                trip.platform.value,
                f"{trip.distance:.2f}",
                f"{trip.fare:.2f}",
                trip.start_time.isoformat(),
                trip.end_time.isoformat(),
                trip.partner_id or "",
            ]
            for trip in trips
        ),
    )


def costs_to_csv(costs: Iterable[Cost]) -> str:
    return _write(
        COST_HEADERS,
        (
            [
                cost.id,
                f"{cost.amount:.2f}",
                cost.date.isoformat(),
                cost.category.value,
                cost.description or "",
            ]
            for cost in costs
        ),
    )
