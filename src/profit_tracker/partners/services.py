import logging
import uuid
from typing import List

from src.profit_tracker.partners.exceptions import (
    PartnerNotCustomException,
    PartnerNotFoundException,
)
from src.profit_tracker.partners.predefined import DEFAULT_PARTNER_ID
from src.profit_tracker.partners.registry import PartnerRegistry
from src.profit_tracker.partners.repositories import ISettingsRepository
from src.profit_tracker.partners.schemas import (
    AppSettings,
    AppSettingsUpdateDTO,
    Partner,
    PartnerCreateDTO,
)

logger = logging.getLogger(__name__)


class PartnerService:
    def __init__(self, settings_repo: ISettingsRepository):
        self.settings_repo = settings_repo

    async def get_registry(self) -> PartnerRegistry:
        return PartnerRegistry.from_settings(await self.settings_repo.load())

    async def list_partners(self) -> List[Partner]:
        return (await self.get_registry()).all()

    async def get_active_partner(self) -> Partner:
        settings = await self.settings_repo.load()
        return PartnerRegistry.from_settings(settings).resolve(
            settings.selected_partner_id
        )

    async def add_partner(self, data: PartnerCreateDTO) -> Partner:
        settings = await self.settings_repo.load()
        partner = Partner(
            id=f"custom_{uuid.uuid4().hex}", is_custom=True, **data.model_dump()
        )
        await self.settings_repo.save(
            settings.model_copy(
                update={"custom_partners": [*settings.custom_partners, partner]}
            )
        )
        logger.info("Added custom partner %s (%s)", partner.id, partner.name)
        return partner

    async def update_partner(self, partner_id: str, data: PartnerCreateDTO) -> Partner:
        """
        Update a custom partner, or override the built-in default partner.
        The override is stored with the custom partners and replaces the
        built-in entry in the merged view.
        """
        settings = await self.settings_repo.load()

        if partner_id == DEFAULT_PARTNER_ID:
            partner = Partner(id=partner_id, is_custom=False, **data.model_dump())
            others = [p for p in settings.custom_partners if p.id != partner_id]
            custom_partners = [*others, partner]
        else:
            existing = PartnerRegistry.from_settings(settings).find(partner_id)
            if existing is None:
                raise PartnerNotFoundException(partner_id)
            if not existing.is_custom:
                raise PartnerNotCustomException(partner_id)
            partner = Partner(id=partner_id, is_custom=True, **data.model_dump())
            custom_partners = [
                partner if p.id == partner_id else p for p in settings.custom_partners
            ]

        await self.settings_repo.save(
            settings.model_copy(update={"custom_partners": custom_partners})
        )
        logger.info("Updated partner %s", partner_id)
        return partner

    async def delete_partner(self, partner_id: str) -> None:
        settings = await self.settings_repo.load()
        partner = next(
            (p for p in settings.custom_partners if p.id == partner_id), None
        )
        if partner is None:
            if PartnerRegistry.from_settings(settings).find(partner_id) is None:
                raise PartnerNotFoundException(partner_id)
            raise PartnerNotCustomException(partner_id)
        if not partner.is_custom:
            raise PartnerNotCustomException(partner_id)

        selected = settings.selected_partner_id
        if selected == partner_id:
            selected = DEFAULT_PARTNER_ID

        await self.settings_repo.save(
            settings.model_copy(
                update={
                    "selected_partner_id": selected,
                    "custom_partners": [
                        p for p in settings.custom_partners if p.id != partner_id
                    ],
                }
            )
        )
        logger.info("Deleted custom partner %s", partner_id)

    async def get_settings(self) -> AppSettings:
        return await self.settings_repo.load()

    async def update_settings(self, data: AppSettingsUpdateDTO) -> AppSettings:
        settings = await self.settings_repo.load()
        changes = data.model_dump(exclude_unset=True)

        selected = changes.get("selected_partner_id")
        if selected is not None:
            if PartnerRegistry.from_settings(settings).find(selected) is None:
                raise PartnerNotFoundException(selected)

        return await self.settings_repo.save(settings.model_copy(update=changes))
