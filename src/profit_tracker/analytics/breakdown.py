from collections import defaultdict
from typing import Dict, List, Sequence

from src.profit_tracker.analytics.schemas import CostBreakdownItem
from src.profit_tracker.daily_summary.fixed_costs import IFixedCostCalculator
from src.profit_tracker.daily_summary.schemas import DaySummary
from src.profit_tracker.partners.schemas import RentalCarConfig


class CategoryCostBreakdown:
    """
    Spend by label across day summaries: incidental costs by category, then
    one line per fixed-cost, commission, daily recurring and weekly rental
    description. Lines sharing a label are merged.
    """

    def __init__(self, fixed_cost_calculator: IFixedCostCalculator):
        self.fixed_cost_calculator = fixed_cost_calculator

    def breakdown(self, day_summaries: Sequence[DaySummary]) -> List[CostBreakdownItem]:
        incidental: Dict[str, float] = defaultdict(float)
        fixed: Dict[str, float] = defaultdict(float)
        commission: Dict[str, float] = defaultdict(float)
        daily_recurring: Dict[str, float] = defaultdict(float)
        rental: Dict[str, float] = defaultdict(float)

        for day in day_summaries:
            for cost in day.incidental_costs:
                incidental[cost.category.value] += cost.amount

            for line in self.fixed_cost_calculator.itemize(day.partner, day.date):
                fixed[line.label] += line.amount

            partner = day.partner
            if partner is not None and partner.commission is not None:
                commission[partner.commission.description] += day.commission_amount

            if day.applied_daily_cost is not None:
                daily_recurring[day.applied_daily_cost.description] += (
                    day.applied_daily_cost.amount
                )

            if (
                day.applied_rental_cost > 0
                and partner is not None
                and isinstance(partner.car_config, RentalCarConfig)
                and partner.car_config.rental_cost is not None
            ):
                rental[partner.car_config.rental_cost.description] += (
                    day.applied_rental_cost
                )

        merged: Dict[str, float] = defaultdict(float)
        for group in (incidental, fixed, commission, daily_recurring, rental):
            for label, amount in group.items():
                merged[label] += amount

        return [
            CostBreakdownItem(label=label, amount=amount)
            for label, amount in merged.items()
            if amount > 0
        ]
