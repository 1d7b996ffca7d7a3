from datetime import datetime, timezone

from src.profit_tracker.analytics.profitability import (
    earnings_by_weekday,
    hourly_profitability,
)


def test_hourly_profitability_matrix(aggregator, registry, make_trip):
    trips = [
        # Monday 08:00, one hour
        make_trip(
            datetime(2024, 5, 20, 8, 0, tzinfo=timezone.utc), minutes=60, fare=100.0
        ),
        # Wednesday 17:00, half an hour under a 50% commission
        make_trip(
            datetime(2024, 5, 22, 17, 0, tzinfo=timezone.utc),
            minutes=30,
            fare=40.0,
            partner_id="partner_a_commission",
        ),
    ]
    summaries = aggregator.build_summaries(trips, [], registry)

    matrix = hourly_profitability(summaries, "UTC").matrix

    assert len(matrix) == 7
    assert all(len(row) == 24 for row in matrix)
    assert matrix[0][8] == 100.0
    assert matrix[2][17] == 40.0
    assert matrix[0][9] is None
    filled = [cell for row in matrix for cell in row if cell is not None]
    assert len(filled) == 2


def test_hourly_profitability_uses_local_time(aggregator, registry, make_trip):
    trip = make_trip(
        datetime(2024, 5, 20, 6, 0, tzinfo=timezone.utc), minutes=60, fare=30.0
    )
    summaries = aggregator.build_summaries([trip], [], registry)

    matrix = hourly_profitability(summaries, "Europe/Warsaw").matrix

    assert matrix[0][8] == 30.0


def test_earnings_by_weekday(make_trip):
    trips = [
        make_trip(datetime(2024, 5, 20, 8, tzinfo=timezone.utc), fare=10.0),
        make_trip(datetime(2024, 5, 27, 8, tzinfo=timezone.utc), fare=15.0),
        make_trip(datetime(2024, 5, 26, 8, tzinfo=timezone.utc), fare=7.5),
    ]

    earnings = earnings_by_weekday(trips, "UTC")

    assert [e.weekday for e in earnings] == [
        "Mon",
        "Tue",
        "Wed",
        "Thu",
        "Fri",
        "Sat",
        "Sun",
    ]
    assert earnings[0].earnings == 25.0
    assert earnings[6].earnings == 7.5
    assert sum(e.earnings for e in earnings) == 32.5
