from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Sequence, Tuple

from src.profit_tracker.costs.schemas import Cost, CostCategory
from src.profit_tracker.partners.schemas import (
    FuelPayer,
    OwnCarConfig,
    Partner,
    RentalCarConfig,
)
from src.profit_tracker.trips.schemas import Trip


class IFuelCostEstimator(ABC):
    @abstractmethod
    def estimate(
        self,
        day: date,
        trips: Sequence[Trip],
        recorded_costs: Sequence[Cost],
        partner: Optional[Partner],
    ) -> Optional[Cost]:
        """Synthesize a fuel cost for a day without a recorded one"""
        ...


class DailyDistanceFuelEstimator(IFuelCostEstimator):
    """
    Estimates a day's fuel spend from an assumed daily distance rather than
    the distance of the recorded trips.
    """

    def __init__(self, estimated_daily_distance_km: float = 300.0):
        self.estimated_daily_distance_km = estimated_daily_distance_km

    def estimate(
        self,
        day: date,
        trips: Sequence[Trip],
        recorded_costs: Sequence[Cost],
        partner: Optional[Partner],
    ) -> Optional[Cost]:
        if not trips:
            return None
        if any(cost.category == CostCategory.FUEL for cost in recorded_costs):
            return None

        fuel_config = self.fuel_config(partner)
        if fuel_config is None:
            return None

        consumption, price = fuel_config
        fuel_liters = self.estimated_daily_distance_km / 100 * consumption
        distance_label = f"{self.estimated_daily_distance_km:g}"

        return Cost(
            id=f"estimated_fuel_{day.isoformat()}",
            amount=fuel_liters * price,
            date=day,
            category=CostCategory.FUEL,
            description=f"Estimated fuel ({distance_label} km assumed)",
        )

    @staticmethod
    def fuel_config(partner: Optional[Partner]) -> Optional[Tuple[float, float]]:
        """(consumption per 100 km, price per litre) paid by the driver, if known"""
        if partner is None:
            return None

        car_config = partner.car_config
        if isinstance(car_config, OwnCarConfig):
            consumption = car_config.avg_fuel_consumption
            price = car_config.fuel_price
        elif isinstance(car_config, RentalCarConfig):
            if car_config.fuel_covered_by != FuelPayer.driver:
                return None
            consumption = car_config.avg_fuel_consumption or 0.0
            price = car_config.fuel_price or 0.0
        else:
            raise TypeError(f"Unsupported car config: {type(car_config).__name__}")

        if consumption > 0 and price > 0:
            return consumption, price
        return None
