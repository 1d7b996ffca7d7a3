import logging
from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Response
from src.profit_tracker.history.schemas import HistoryItem
from src.profit_tracker.trips.dependencies import get_trip_service
from src.profit_tracker.trips.schemas import Trip, TripCreateDTO, TripImportDTO
from src.profit_tracker.trips.services import TripService

logger = logging.getLogger(__name__)
trips_router = APIRouter(prefix="/trips", tags=["Trips"])


@trips_router.get("", response_model=List[Trip])
async def list_trips(service: TripService = Depends(get_trip_service)):
    return await service.list_trips()


@trips_router.post("", response_model=Trip, status_code=HTTPStatus.CREATED)
async def add_trip(
    data: TripCreateDTO, service: TripService = Depends(get_trip_service)
):
    return await service.add_trip(data)


@trips_router.post(
    "/import", response_model=HistoryItem, status_code=HTTPStatus.CREATED
)
async def import_trips(
    data: TripImportDTO, service: TripService = Depends(get_trip_service)
):
    logger.info(f"Import of {len(data.trips)} trips from {data.file_name}")
    return await service.import_trips(data)


@trips_router.delete("/{trip_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_trip(trip_id: str, service: TripService = Depends(get_trip_service)):
    await service.delete_trip(trip_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
