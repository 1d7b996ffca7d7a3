from datetime import date
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)


class RentalFrequency(str, Enum):
    weekly = "weekly"
    monthly = "monthly"


class FuelPayer(str, Enum):
    partner = "partner"
    driver = "driver"


class FixedCost(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    amount: float = Field(..., ge=0)
    frequency: RentalFrequency
    start_date: date


class PercentageCost(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    percentage: float = Field(..., ge=0, le=100)


class InsurancePolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    amount: float = Field(..., ge=0)
    start_date: date
    end_date: date

    @field_validator("end_date")
    @classmethod
    def validate_coverage(cls, end: date, info: ValidationInfo):
        start = info.data.get("start_date")
        if start and end <= start:
            raise ValueError("end_date must be after start_date")
        return end


class DailyRecurringCost(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    amount: float = Field(..., ge=0)


class DailyRecurringTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    description: str
    minutes: int = Field(..., gt=0)


class OwnCarConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["own"] = "own"
    model: Optional[str] = None
    avg_fuel_consumption: float = Field(..., ge=0, description="Litres per 100 km")
    fuel_price: float = Field(..., ge=0)
    deadhead_mileage_percent: float = Field(0.0, ge=0, le=100)
    insurance_policies: List[InsurancePolicy] = []


class RentalCarConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["rental"] = "rental"
    rental_cost: Optional[FixedCost] = None
    fuel_covered_by: FuelPayer
    avg_fuel_consumption: Optional[float] = Field(None, ge=0)
    fuel_price: Optional[float] = Field(None, ge=0)


CarConfig = Annotated[Union[OwnCarConfig, RentalCarConfig], Field(discriminator="type")]


class PartnerBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    commission: Optional[PercentageCost] = None
    car_config: CarConfig
    daily_recurring_cost: Optional[DailyRecurringCost] = None
    daily_recurring_time: Optional[DailyRecurringTime] = None


class Partner(PartnerBase):
    id: str
    is_custom: bool = False


class PartnerCreateDTO(PartnerBase):
    pass


class AppSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_partner_id: Optional[str] = "own_car_default"
    custom_partners: List[Partner] = []
    has_seen_welcome_modal: bool = False


class AppSettingsUpdateDTO(BaseModel):
    selected_partner_id: Optional[str] = None
    has_seen_welcome_modal: Optional[bool] = None
