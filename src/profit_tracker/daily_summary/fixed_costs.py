from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from pydantic import BaseModel

from src.profit_tracker.daily_summary.utils import inclusive_days
from src.profit_tracker.partners.schemas import (
    OwnCarConfig,
    Partner,
    RentalCarConfig,
    RentalFrequency,
)


class CostLine(BaseModel):
    label: str
    amount: float


class IFixedCostCalculator(ABC):
    @abstractmethod
    def itemize(self, partner: Optional[Partner], day: date) -> List[CostLine]:
        """Labelled fixed-cost portions attributable to a single day"""
        ...

    def prorated_fixed_cost(self, partner: Optional[Partner], day: date) -> float:
        return sum(line.amount for line in self.itemize(partner, day))


class ProratedFixedCostCalculator(IFixedCostCalculator):
    """
    Spreads monthly rental fees and insurance premiums over single days.

    Monthly rentals use a flat divisor (30 days by default) regardless of the
    actual month length. Weekly rentals are not handled here, they belong to
    the weekly rental allocator.
    """

    def __init__(self, monthly_divisor_days: int = 30):
        self.monthly_divisor_days = monthly_divisor_days

    def itemize(self, partner: Optional[Partner], day: date) -> List[CostLine]:
        if partner is None:
            return []

        car_config = partner.car_config
        if isinstance(car_config, RentalCarConfig):
            return self._rental_lines(car_config, day)
        elif isinstance(car_config, OwnCarConfig):
            return self._insurance_lines(car_config, day)
        else:
            raise TypeError(f"Unsupported car config: {type(car_config).__name__}")

    def _rental_lines(self, car_config: RentalCarConfig, day: date) -> List[CostLine]:
        rental = car_config.rental_cost
        if (
            rental is None
            or rental.frequency != RentalFrequency.monthly
            or day < rental.start_date
        ):
            return []
        return [
            CostLine(
                label=rental.description,
                amount=rental.amount / self.monthly_divisor_days,
            )
        ]

    def _insurance_lines(self, car_config: OwnCarConfig, day: date) -> List[CostLine]:
        lines = []
        for policy in car_config.insurance_policies:
            if not policy.start_date <= day <= policy.end_date:
                continue
            coverage_days = inclusive_days(policy.start_date, policy.end_date)
            if coverage_days > 0:
                lines.append(
                    CostLine(
                        label=policy.description,
                        amount=policy.amount / coverage_days,
                    )
                )
        return lines
