from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.profit_tracker.config import get_settings
from src.profit_tracker.daily_summary.utils import localize


class Platform(str, Enum):
    UBER = "Uber"
    BOLT = "Bolt"


def localize_naive(value: datetime) -> datetime:
    """Naive trip timestamps are wall-clock times in the configured timezone."""
    if value.tzinfo is not None:
        return value
    return localize(value, get_settings().TIMEZONE)


class Trip(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    platform: Platform
    distance: float  # km
    fare: float
    start_time: datetime
    end_time: datetime
    partner_id: Optional[str] = None
    pickup_address: Optional[str] = None
    payment_method: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_timezone(cls, value: datetime) -> datetime:
        return localize_naive(value)


class TripCreateDTO(BaseModel):
    platform: Platform
    distance: float = Field(..., ge=0, description="Distance in kilometers")
    fare: float = Field(..., ge=0)
    start_time: datetime
    end_time: datetime
    pickup_address: Optional[str] = None
    payment_method: Optional[str] = None
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, start: datetime) -> datetime:
        return localize_naive(start)

    @field_validator("end_time")
    @classmethod
    def validate_time_range(cls, end: datetime, info: ValidationInfo):
        end = localize_naive(end)
        start = info.data.get("start_time")
        if start and end < start:
            raise ValueError("end_time must be after or equal to start_time")
        return end


class TripImportDTO(BaseModel):
    file_name: str
    platform: Platform
    partner_id: Optional[str] = None
    trips: List[TripCreateDTO] = Field(..., min_length=1)
