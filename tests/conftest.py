from contextlib import asynccontextmanager
from datetime import timedelta, timezone

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from src.profit_tracker.daily_summary.aggregator import DailyAggregator
from src.profit_tracker.daily_summary.fixed_costs import ProratedFixedCostCalculator
from src.profit_tracker.daily_summary.fuel import DailyDistanceFuelEstimator
from src.profit_tracker.daily_summary.rental import WeeklyRentalAllocator
from src.profit_tracker.main import app
from src.profit_tracker.partners.registry import PartnerRegistry
from src.profit_tracker.storage.dependencies import get_store
from src.profit_tracker.storage.memory import InMemoryKeyValueStore
from src.profit_tracker.trips.schemas import Platform, Trip
from tests.mocks.config_mocks import mock_get_settings  # noqa: F401

# -----------------------------------------------------------------------------
# ENGINE FIXTURES
# -----------------------------------------------------------------------------


@pytest.fixture
def registry():
    return PartnerRegistry()


@pytest.fixture
def aggregator():
    return DailyAggregator(
        fixed_cost_calculator=ProratedFixedCostCalculator(),
        rental_allocator=WeeklyRentalAllocator(),
        fuel_estimator=DailyDistanceFuelEstimator(),
        timezone="UTC",
    )


@pytest.fixture
def make_trip():
    counter = {"n": 0}

    def _make_trip(
        start,
        minutes=30,
        fare=50.0,
        distance=10.0,
        partner_id="own_car_default",
        platform=Platform.UBER,
    ):
        counter["n"] += 1
        if start.tzinfo is None:
            start = start.replace(tzinfo=timezone.utc)
        return Trip(
            id=f"trip_{counter['n']}",
            platform=platform,
            distance=distance,
            fare=fare,
            start_time=start,
            end_time=start + timedelta(minutes=minutes),
            partner_id=partner_id,
        )

    return _make_trip


# -----------------------------------------------------------------------------
# FASTAPI CLIENT FOR API TESTING
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_openapi_schema():
    app.openapi_schema = None
    yield
    app.openapi_schema = None


@pytest.fixture(scope="function")
def store():
    return InMemoryKeyValueStore()


@pytest.fixture(scope="function")
async def async_client(store):
    """
    Provide an async client for FastAPI test with lifespan events.
    Every test gets its own empty in-memory store.
    """

    @asynccontextmanager
    async def test_lifespan(_):
        yield

    app.router.lifespan_context = test_lifespan
    app.dependency_overrides[get_store] = lambda: store
    try:
        async with LifespanManager(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(
                transport=transport, base_url="http://test"
            ) as client:
                yield client
    finally:
        app.dependency_overrides.clear()
