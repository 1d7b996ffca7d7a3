from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Response
from src.profit_tracker.costs.dependencies import get_cost_service
from src.profit_tracker.costs.schemas import Cost, CostCreateDTO
from src.profit_tracker.costs.services import CostService

costs_router = APIRouter(prefix="/costs", tags=["Costs"])


@costs_router.get("", response_model=List[Cost])
async def list_costs(service: CostService = Depends(get_cost_service)):
    return await service.list_costs()


@costs_router.post("", response_model=Cost, status_code=HTTPStatus.CREATED)
async def add_cost(
    data: CostCreateDTO, service: CostService = Depends(get_cost_service)
):
    return await service.add_cost(data)


@costs_router.delete("/{cost_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_cost(cost_id: str, service: CostService = Depends(get_cost_service)):
    await service.delete_cost(cost_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
