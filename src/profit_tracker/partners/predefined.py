from datetime import date
from typing import List

from src.profit_tracker.partners.schemas import (
    FixedCost,
    FuelPayer,
    OwnCarConfig,
    Partner,
    PercentageCost,
    RentalCarConfig,
    RentalFrequency,
)

DEFAULT_PARTNER_ID = "own_car_default"

PREDEFINED_PARTNERS: List[Partner] = [
    Partner(
        id=DEFAULT_PARTNER_ID,
        name="Own car",
        is_custom=False,
        commission=None,
        car_config=OwnCarConfig(
            model="Toyota Prius",
            avg_fuel_consumption=5.5,
            fuel_price=6.85,
            deadhead_mileage_percent=15,
            insurance_policies=[],
        ),
    ),
    Partner(
        id="partner_a_commission",
        name="Partner A (50% commission)",
        is_custom=False,
        commission=PercentageCost(
            id="partner_a_commission_id",
            description="Commission 50%",
            percentage=50,
        ),
        car_config=RentalCarConfig(
            rental_cost=FixedCost(
                id="partner_a_rental_id",
                description="Car rental (included in commission)",
                amount=0,
                frequency=RentalFrequency.weekly,
                start_date=date(2000, 1, 1),
            ),
            fuel_covered_by=FuelPayer.partner,
        ),
    ),
    Partner(
        id="partner_b_rental",
        name="Partner B (car rental)",
        is_custom=False,
        commission=None,
        car_config=RentalCarConfig(
            rental_cost=FixedCost(
                id="partner_b_rental_id",
                description="Weekly car rental",
                amount=600,
                frequency=RentalFrequency.weekly,
                start_date=date(2000, 1, 1),
            ),
            fuel_covered_by=FuelPayer.driver,
            avg_fuel_consumption=8.0,
            fuel_price=6.85,
        ),
    ),
]
