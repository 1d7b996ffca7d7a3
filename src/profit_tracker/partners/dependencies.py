from fastapi import Depends
from src.profit_tracker.partners.repositories import ISettingsRepository
from src.profit_tracker.partners.services import PartnerService
from src.profit_tracker.storage.dependencies import get_settings_repository


def get_partner_service(
    settings_repo: ISettingsRepository = Depends(get_settings_repository),
) -> PartnerService:
    return PartnerService(settings_repo)
