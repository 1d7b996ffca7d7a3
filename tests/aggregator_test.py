from datetime import date, datetime, timezone

import pytest

from src.profit_tracker.config import Settings
from src.profit_tracker.costs.schemas import Cost, CostCategory
from src.profit_tracker.daily_summary.aggregator import DailyAggregator
from src.profit_tracker.daily_summary.fixed_costs import ProratedFixedCostCalculator
from src.profit_tracker.daily_summary.fuel import DailyDistanceFuelEstimator
from src.profit_tracker.daily_summary.rental import WeeklyRentalAllocator
from src.profit_tracker.partners.registry import PartnerRegistry
from src.profit_tracker.partners.schemas import (
    DailyRecurringCost,
    DailyRecurringTime,
    OwnCarConfig,
    Partner,
)
from src.profit_tracker.trips.schemas import Platform, Trip
from tests.mocks.config_mocks import VALID_SETTINGS_DATA

MONDAY = date(2024, 5, 20)


def at(day, hour, minute=0):
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=timezone.utc)


def test_own_car_day(aggregator, registry, make_trip):
    trips = [
        make_trip(at(MONDAY, 10), fare=70.0),
        make_trip(at(MONDAY, 8), fare=50.0),
    ]

    [summary] = aggregator.build_summaries(trips, [], registry)

    assert summary.date == MONDAY
    assert summary.id == "2024-05-20"
    assert summary.trip_count == 2
    assert summary.total_revenue == 120.0
    assert summary.total_distance == 20.0
    assert summary.total_costs == pytest.approx(113.025)
    assert summary.net_profit == pytest.approx(6.975)
    # 08:00 until the second trip ends at 10:30
    assert summary.work_duration_ms == 9_000_000
    assert summary.work_duration_label == "2h 30m"
    assert summary.profit_per_hour == pytest.approx(2.79)
    assert [t.fare for t in summary.trips] == [50.0, 70.0]
    assert summary.partner.id == "own_car_default"


def test_partner_b_weekly_rental(aggregator, registry, make_trip):
    days = [MONDAY, date(2024, 5, 22), date(2024, 5, 24)]
    trips = [make_trip(at(day, 9), partner_id="partner_b_rental") for day in days]

    summaries = aggregator.build_summaries(trips, [], registry)

    assert [s.date for s in summaries] == list(reversed(days))
    for summary in summaries:
        assert summary.applied_rental_cost == pytest.approx(200.0)
        assert summary.total_costs == pytest.approx(200.0 + 164.4)
        assert summary.net_profit == pytest.approx(50.0 - 364.4)


def test_partner_a_commission(aggregator, registry, make_trip):
    trips = [make_trip(at(MONDAY, 9), fare=100.0, partner_id="partner_a_commission")]

    [summary] = aggregator.build_summaries(trips, [], registry)

    assert summary.commission_amount == 50.0
    assert summary.total_costs == 50.0
    assert summary.net_profit == 50.0
    assert summary.incidental_costs == []


def test_expense_only_day(aggregator, registry):
    cost = Cost(
        id="c1", amount=40, date=date(2024, 5, 21), category=CostCategory.CAR_WASH
    )

    [summary] = aggregator.build_summaries([], [cost], registry)

    assert summary.trip_count == 0
    assert summary.total_revenue == 0.0
    assert summary.total_costs == 40.0
    assert summary.net_profit == -40.0
    assert summary.work_duration_ms == 0
    assert summary.profit_per_hour == 0.0
    assert summary.applied_daily_cost is None
    assert summary.partner.id == "own_car_default"


def test_recorded_fuel_replaces_estimate(aggregator, registry, make_trip):
    fuel = Cost(id="c1", amount=80, date=MONDAY, category=CostCategory.FUEL)

    [summary] = aggregator.build_summaries(
        [make_trip(at(MONDAY, 9), fare=200.0)], [fuel], registry
    )

    assert [c.id for c in summary.incidental_costs] == ["c1"]
    assert summary.total_costs == 80.0


def test_unknown_partner_falls_back_to_default(aggregator, registry, make_trip):
    [summary] = aggregator.build_summaries(
        [make_trip(at(MONDAY, 9), partner_id="deleted_partner")], [], registry
    )
    assert summary.partner.id == "own_car_default"


def test_first_trip_of_the_day_sets_partner(aggregator, registry, make_trip):
    trips = [
        make_trip(at(MONDAY, 14), partner_id="partner_a_commission"),
        make_trip(at(MONDAY, 7), partner_id="partner_b_rental"),
    ]

    [summary] = aggregator.build_summaries(trips, [], registry)

    assert summary.partner.id == "partner_b_rental"


def test_daily_recurring_cost_and_time(aggregator, make_trip):
    partner = Partner(
        id="custom_daily",
        name="Daily fee partner",
        is_custom=True,
        car_config=OwnCarConfig(avg_fuel_consumption=0, fuel_price=0),
        daily_recurring_cost=DailyRecurringCost(
            id="fee", description="Daily app fee", amount=20
        ),
        daily_recurring_time=DailyRecurringTime(
            id="prep", description="Car preparation", minutes=30
        ),
    )
    registry = PartnerRegistry(custom_partners=[partner])

    [summary] = aggregator.build_summaries(
        [make_trip(at(MONDAY, 9), minutes=60, fare=100.0, partner_id=partner.id)],
        [],
        registry,
    )

    assert summary.daily_recurring_amount == 20.0
    assert summary.applied_daily_cost.description == "Daily app fee"
    assert summary.total_costs == 20.0
    assert summary.work_duration_ms == 5_400_000


def test_net_profit_invariant_and_idempotence(aggregator, registry, make_trip):
    trips = [
        make_trip(at(MONDAY, 8), partner_id="partner_b_rental"),
        make_trip(at(date(2024, 5, 21), 8), partner_id="partner_a_commission"),
        make_trip(at(date(2024, 5, 23), 8)),
    ]
    costs = [
        Cost(id="c1", amount=25, date=date(2024, 5, 23), category=CostCategory.SERVICE),
        Cost(id="c2", amount=15, date=date(2024, 5, 25), category=CostCategory.OTHER),
    ]

    first = aggregator.build_summaries(trips, costs, registry)
    second = aggregator.build_summaries(trips, costs, registry)

    assert first == second
    for summary in first:
        assert summary.net_profit == summary.total_revenue - summary.total_costs
    assert [s.date for s in first] == sorted((s.date for s in first), reverse=True)


def test_trips_grouped_by_local_day(registry, make_trip):
    warsaw = DailyAggregator(
        ProratedFixedCostCalculator(),
        WeeklyRentalAllocator(),
        DailyDistanceFuelEstimator(),
        timezone="Europe/Warsaw",
    )
    trip = make_trip(datetime(2024, 5, 19, 23, 30, tzinfo=timezone.utc))

    [summary] = warsaw.build_summaries([trip], [], registry)

    assert summary.date == MONDAY


def test_naive_and_aware_trips_share_a_day(aggregator, registry, make_trip):
    manual = Trip(
        id="manual",
        platform=Platform.BOLT,
        distance=5.0,
        fare=30.0,
        start_time=datetime(2024, 5, 20, 8, 0),
        end_time=datetime(2024, 5, 20, 8, 20),
        partner_id="partner_a_commission",
    )
    imported = make_trip(at(MONDAY, 10), partner_id="partner_a_commission")

    [summary] = aggregator.build_summaries([imported, manual], [], registry)

    assert type(summary.date) is date
    assert summary.date == MONDAY
    assert [t.id for t in summary.trips] == ["manual", imported.id]
    # 08:00 until the imported trip ends at 10:30
    assert summary.work_duration_ms == 9_000_000


def test_cost_before_midnight_lands_on_local_day(monkeypatch, registry, make_trip):
    monkeypatch.setattr(
        "src.profit_tracker.costs.schemas.get_settings",
        lambda: Settings(**{**VALID_SETTINGS_DATA, "TIMEZONE": "Europe/Warsaw"}),
    )
    warsaw = DailyAggregator(
        ProratedFixedCostCalculator(),
        WeeklyRentalAllocator(),
        DailyDistanceFuelEstimator(),
        timezone="Europe/Warsaw",
    )
    trip = make_trip(datetime(2024, 5, 19, 23, 30, tzinfo=timezone.utc))
    fuel = Cost(
        id="c1", amount=80, date="2024-05-19T23:30:00Z", category=CostCategory.FUEL
    )

    [summary] = warsaw.build_summaries([trip], [fuel], registry)

    assert fuel.date == MONDAY
    assert summary.date == MONDAY
    assert [c.id for c in summary.incidental_costs] == ["c1"]


def test_aggregate_day_without_partner(aggregator, make_trip):
    trips = [
        make_trip(at(MONDAY, 9), minutes=60, fare=100.0),
        make_trip(at(MONDAY, 11), minutes=30, fare=40.0),
    ]
    costs = [
        Cost(id="c1", amount=25, date=MONDAY, category=CostCategory.CAR_WASH),
        Cost(id="c2", amount=15, date=MONDAY, category=CostCategory.OTHER),
    ]

    summary = aggregator.aggregate_day(MONDAY, trips, costs, None, 0.0)

    assert summary.partner is None
    assert summary.commission_amount == 0.0
    assert summary.fixed_cost_amount == 0.0
    assert summary.daily_recurring_amount == 0.0
    assert summary.applied_daily_cost is None
    assert summary.total_costs == 40.0
    assert summary.net_profit == 100.0
    # 09:00 until 11:30 with no recurring time added
    assert summary.work_duration_ms == 9_000_000
