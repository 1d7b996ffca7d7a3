from typing import List

from fastapi import APIRouter, Depends
from src.profit_tracker.daily_summary.dependencies import get_day_summary_service
from src.profit_tracker.daily_summary.schemas import DaySummary
from src.profit_tracker.daily_summary.services import DaySummaryService

day_summary_router = APIRouter(prefix="/day-summaries", tags=["Day Summaries"])


@day_summary_router.get("", response_model=List[DaySummary])
async def get_day_summaries(
    service: DaySummaryService = Depends(get_day_summary_service),
):
    return await service.get_day_summaries()
