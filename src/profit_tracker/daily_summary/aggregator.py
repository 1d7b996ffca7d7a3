import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from src.profit_tracker.costs.schemas import Cost
from src.profit_tracker.daily_summary.fixed_costs import IFixedCostCalculator
from src.profit_tracker.daily_summary.fuel import IFuelCostEstimator
from src.profit_tracker.daily_summary.rental import IRentalAllocator
from src.profit_tracker.daily_summary.schemas import DayActivity, DaySummary
from src.profit_tracker.daily_summary.utils import (
    MS_PER_MINUTE,
    duration_ms,
    per_hour,
    to_day,
)
from src.profit_tracker.partners.registry import PartnerRegistry
from src.profit_tracker.partners.schemas import Partner
from src.profit_tracker.trips.schemas import Trip

logger = logging.getLogger(__name__)


class DailyAggregator:
    def __init__(
        self,
        fixed_cost_calculator: IFixedCostCalculator,
        rental_allocator: IRentalAllocator,
        fuel_estimator: IFuelCostEstimator,
        timezone: str = "UTC",
    ):
        self.fixed_cost_calculator = fixed_cost_calculator
        self.rental_allocator = rental_allocator
        self.fuel_estimator = fuel_estimator
        self.timezone = timezone

    def build_summaries(
        self,
        trips: Iterable[Trip],
        costs: Iterable[Cost],
        registry: PartnerRegistry,
    ) -> List[DaySummary]:
        """
        Recompute every day summary from the full trip and cost collections.
        Summaries are returned newest first.
        """
        activity = self.group_by_day(trips, costs)

        partners: Dict[date, Partner] = {}
        for day, day_activity in activity.items():
            first_trip = day_activity.trips[0] if day_activity.trips else None
            partners[day] = registry.resolve(
                first_trip.partner_id if first_trip else None
            )

        # The fuel estimate must only see manually recorded costs
        for day, day_activity in activity.items():
            estimated_fuel = self.fuel_estimator.estimate(
                day, day_activity.trips, day_activity.costs, partners[day]
            )
            if estimated_fuel is not None:
                day_activity.costs.append(estimated_fuel)

        rental_shares = self.rental_allocator.allocate(
            (partners[day], day)
            for day, day_activity in activity.items()
            if day_activity.trips
        )

        summaries = [
            self.aggregate_day(
                day,
                day_activity.trips,
                day_activity.costs,
                partners[day],
                rental_shares.get(day, 0.0),
            )
            for day, day_activity in activity.items()
        ]
        logger.debug("Aggregated %d day summaries", len(summaries))

        return sorted(summaries, key=lambda s: s.date, reverse=True)

    def group_by_day(
        self, trips: Iterable[Trip], costs: Iterable[Cost]
    ) -> Dict[date, DayActivity]:
        activity: Dict[date, DayActivity] = defaultdict(DayActivity)

        for trip in trips:
            activity[to_day(trip.start_time, self.timezone)].trips.append(trip)

        for cost in costs:
            activity[cost.date].costs.append(cost)

        for day_activity in activity.values():
            day_activity.trips.sort(key=lambda t: t.start_time)

        return {day: activity[day] for day in sorted(activity)}

    def aggregate_day(
        self,
        day: date,
        trips: Sequence[Trip],
        incidental_costs: Sequence[Cost],
        partner: Optional[Partner],
        weekly_rental_share: float = 0.0,
    ) -> DaySummary:
        day_trips = sorted(trips, key=lambda t: t.start_time)

        total_revenue = sum(trip.fare for trip in day_trips)
        total_distance = sum(trip.distance for trip in day_trips)

        incidental_amount = sum(cost.amount for cost in incidental_costs)
        fixed_cost_amount = self.fixed_cost_calculator.prorated_fixed_cost(
            partner, day
        )

        commission_amount = 0.0
        if partner is not None and partner.commission is not None:
            commission_amount = total_revenue * (partner.commission.percentage / 100)

        applied_daily_cost = None
        if day_trips and partner is not None:
            applied_daily_cost = partner.daily_recurring_cost
        daily_recurring_amount = (
            applied_daily_cost.amount if applied_daily_cost else 0.0
        )

        total_costs = (
            incidental_amount
            + fixed_cost_amount
            + commission_amount
            + daily_recurring_amount
            + weekly_rental_share
        )
        net_profit = total_revenue - total_costs

        work_duration_ms = 0
        if day_trips:
            work_duration_ms = duration_ms(
                day_trips[0].start_time, day_trips[-1].end_time
            )
            if partner is not None and partner.daily_recurring_time is not None:
                work_duration_ms += partner.daily_recurring_time.minutes * MS_PER_MINUTE

        return DaySummary(
            date=day,
            work_duration_ms=work_duration_ms,
            total_revenue=total_revenue,
            total_costs=total_costs,
            net_profit=net_profit,
            profit_per_hour=per_hour(net_profit, work_duration_ms),
            trip_count=len(day_trips),
            total_distance=total_distance,
            trips=day_trips,
            incidental_costs=list(incidental_costs),
            partner=partner,
            applied_daily_cost=applied_daily_cost,
            applied_rental_cost=weekly_rental_share,
            fixed_cost_amount=fixed_cost_amount,
            commission_amount=commission_amount,
            daily_recurring_amount=daily_recurring_amount,
        )
