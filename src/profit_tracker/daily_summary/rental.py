import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, Set, Tuple

from src.profit_tracker.daily_summary.utils import week_start
from src.profit_tracker.partners.schemas import (
    Partner,
    RentalCarConfig,
    RentalFrequency,
)

logger = logging.getLogger(__name__)


class IRentalAllocator(ABC):
    @abstractmethod
    def allocate(
        self, partner_days: Iterable[Tuple[Partner, date]]
    ) -> Dict[date, float]:
        """Map each active day to its share of weekly rental fees"""
        ...


class WeeklyRentalAllocator(IRentalAllocator):
    """
    Splits a weekly rental fee evenly across the days of that week on which
    the partner was actually driven. Days without activity get nothing.
    """

    def allocate(
        self, partner_days: Iterable[Tuple[Partner, date]]
    ) -> Dict[date, float]:
        partners: Dict[str, Partner] = {}
        # key: (week_start, partner_id)
        active_days: Dict[Tuple[date, str], Set[date]] = defaultdict(set)

        for partner, day in partner_days:
            partners.setdefault(partner.id, partner)
            active_days[(week_start(day), partner.id)].add(day)

        shares: Dict[date, float] = defaultdict(float)

        for (week, partner_id), days in active_days.items():
            car_config = partners[partner_id].car_config
            if not isinstance(car_config, RentalCarConfig):
                continue

            rental = car_config.rental_cost
            if rental is None or rental.frequency != RentalFrequency.weekly:
                continue
            if week < rental.start_date:
                continue

            daily_portion = rental.amount / len(days)
            for day in days:
                shares[day] += daily_portion

            logger.debug(
                "Weekly rental of partner %s for week %s split over %d day(s)",
                partner_id,
                week.isoformat(),
                len(days),
            )

        return dict(shares)
