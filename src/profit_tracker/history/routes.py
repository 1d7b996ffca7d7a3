from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Response
from src.profit_tracker.history.dependencies import get_history_service
from src.profit_tracker.history.schemas import HistoryItem
from src.profit_tracker.history.services import HistoryService

history_router = APIRouter(prefix="/history", tags=["History"])


@history_router.get("", response_model=List[HistoryItem])
async def list_history(service: HistoryService = Depends(get_history_service)):
    return await service.list_items()


@history_router.delete("/{item_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_history_item(
    item_id: str, service: HistoryService = Depends(get_history_service)
):
    await service.delete_item(item_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
