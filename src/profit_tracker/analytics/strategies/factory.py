from src.profit_tracker.analytics.enums import Granularity
from src.profit_tracker.analytics.strategies.daily import DailyRollupStrategy
from src.profit_tracker.analytics.strategies.interface import IPeriodRollupStrategy
from src.profit_tracker.analytics.strategies.monthly import MonthlyRollupStrategy
from src.profit_tracker.analytics.strategies.weekly import WeeklyRollupStrategy


class PeriodRollupStrategyFactory:
    @staticmethod
    def create(granularity: Granularity) -> IPeriodRollupStrategy:
        if granularity == Granularity.daily:
            return DailyRollupStrategy()
        elif granularity == Granularity.weekly:
            return WeeklyRollupStrategy()
        elif granularity == Granularity.monthly:
            return MonthlyRollupStrategy()
        else:
            raise ValueError("Unsupported granularity")
