from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Response
from src.profit_tracker.partners.dependencies import get_partner_service
from src.profit_tracker.partners.schemas import (
    AppSettings,
    AppSettingsUpdateDTO,
    Partner,
    PartnerCreateDTO,
)
from src.profit_tracker.partners.services import PartnerService

partners_router = APIRouter(prefix="/partners", tags=["Partners"])
settings_router = APIRouter(prefix="/settings", tags=["Settings"])


@partners_router.get("", response_model=List[Partner])
async def list_partners(service: PartnerService = Depends(get_partner_service)):
    return await service.list_partners()


@partners_router.get("/active", response_model=Partner)
async def get_active_partner(service: PartnerService = Depends(get_partner_service)):
    return await service.get_active_partner()


@partners_router.post("", response_model=Partner, status_code=HTTPStatus.CREATED)
async def add_partner(
    data: PartnerCreateDTO, service: PartnerService = Depends(get_partner_service)
):
    return await service.add_partner(data)


@partners_router.put("/{partner_id}", response_model=Partner)
async def update_partner(
    partner_id: str,
    data: PartnerCreateDTO,
    service: PartnerService = Depends(get_partner_service),
):
    return await service.update_partner(partner_id, data)


@partners_router.delete("/{partner_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_partner(
    partner_id: str, service: PartnerService = Depends(get_partner_service)
):
    await service.delete_partner(partner_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@settings_router.get("", response_model=AppSettings)
async def get_app_settings(service: PartnerService = Depends(get_partner_service)):
    return await service.get_settings()


@settings_router.patch("", response_model=AppSettings)
async def update_app_settings(
    data: AppSettingsUpdateDTO, service: PartnerService = Depends(get_partner_service)
):
    return await service.update_settings(data)
