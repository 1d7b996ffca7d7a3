import logging
from typing import Dict, Iterable, List, Optional

from src.profit_tracker.partners.predefined import (
    DEFAULT_PARTNER_ID,
    PREDEFINED_PARTNERS,
)
from src.profit_tracker.partners.schemas import AppSettings, Partner

logger = logging.getLogger(__name__)


class PartnerRegistry:
    """
    Merged, read-only view over the built-in partners and the user's custom
    partners. A custom partner reusing a built-in id replaces it in place,
    every other custom partner is appended.
    """

    def __init__(
        self,
        custom_partners: Iterable[Partner] = (),
        predefined: Iterable[Partner] = PREDEFINED_PARTNERS,
        default_partner_id: str = DEFAULT_PARTNER_ID,
    ):
        merged: Dict[str, Partner] = {p.id: p for p in predefined}
        for partner in custom_partners:
            merged[partner.id] = partner

        if default_partner_id not in merged:
            raise ValueError(f"Default partner {default_partner_id} is not defined")

        self._partners = merged
        self.default_partner_id = default_partner_id

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "PartnerRegistry":
        return cls(custom_partners=settings.custom_partners)

    @property
    def default(self) -> Partner:
        return self._partners[self.default_partner_id]

    def all(self) -> List[Partner]:
        return list(self._partners.values())

    def find(self, partner_id: str) -> Optional[Partner]:
        return self._partners.get(partner_id)

    def resolve(self, partner_id: Optional[str]) -> Partner:
        if partner_id is None:
            return self.default

        partner = self._partners.get(partner_id)
        if partner is None:
            logger.debug(
                "Unknown partner %s, falling back to %s",
                partner_id,
                self.default_partner_id,
            )
            return self.default
        return partner
