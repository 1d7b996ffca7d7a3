from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from src.profit_tracker.trips.schemas import Platform


class HistoryItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: datetime
    type: Literal["trips", "cost"]

    # trip imports
    file_name: Optional[str] = None
    platform: Optional[Platform] = None
    trip_count: Optional[int] = None

    # manually entered costs
    amount: Optional[float] = None
    description: Optional[str] = None

    related_ids: List[str] = []
