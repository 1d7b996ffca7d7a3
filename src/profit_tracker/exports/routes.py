import logging

from fastapi import APIRouter, Depends, Response
from src.profit_tracker.costs.repositories import ICostRepository
from src.profit_tracker.exports.csv_writer import costs_to_csv, trips_to_csv
from src.profit_tracker.storage.dependencies import (
    get_cost_repository,
    get_trip_repository,
)
from src.profit_tracker.trips.repositories import ITripRepository

logger = logging.getLogger(__name__)
exports_router = APIRouter(prefix="/exports", tags=["Exports"])

# Byte order mark so spreadsheet tools pick up UTF-8
BOM = "\ufeff"


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=BOM + content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@exports_router.get("/trips.csv")
async def export_trips(trip_repo: ITripRepository = Depends(get_trip_repository)):
    trips = await trip_repo.list_trips()
    logger.info("Exporting %d trips", len(trips))
    return _csv_response(trips_to_csv(trips), "taxi-profit-tracker-trips.csv")


@exports_router.get("/costs.csv")
async def export_costs(cost_repo: ICostRepository = Depends(get_cost_repository)):
    costs = await cost_repo.list_costs()
    logger.info("Exporting %d costs", len(costs))
    return _csv_response(costs_to_csv(costs), "taxi-profit-tracker-costs.csv")
