import datetime as dt
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.profit_tracker.config import get_settings
from src.profit_tracker.daily_summary.utils import to_day


class CostCategory(str, Enum):
    FUEL = "Fuel"
    CAR_WASH = "CarWash"
    SERVICE = "Service"
    INSURANCE = "Insurance"
    OTHER = "Other"


def truncate_to_date(value: Any) -> Any:
    """
    Accept full timestamps for cost dates and keep only the calendar day.
    Aware timestamps are bucketed in the configured timezone, like trips.
    """
    if isinstance(value, str) and "T" in value:
        value = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            return value.date()
        return to_day(value, get_settings().TIMEZONE)
    return value


class Cost(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    amount: float
    date: dt.date
    category: CostCategory
    description: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> Any:
        return truncate_to_date(value)


class CostCreateDTO(BaseModel):
    amount: float = Field(..., ge=0)
    date: dt.date
    category: CostCategory
    description: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> Any:
        return truncate_to_date(value)
