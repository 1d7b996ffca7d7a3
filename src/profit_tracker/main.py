import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.profit_tracker.analytics.routes import analytics_router
from src.profit_tracker.config import get_settings
from src.profit_tracker.costs.routes import costs_router
from src.profit_tracker.daily_summary.routes import day_summary_router
from src.profit_tracker.exports.routes import exports_router
from src.profit_tracker.health_check.routes import health_router
from src.profit_tracker.history.routes import history_router
from src.profit_tracker.logging_config import setup_logging
from src.profit_tracker.partners.routes import partners_router, settings_router
from src.profit_tracker.storage.redis import redis_manager
from src.profit_tracker.trips.routes import trips_router

settings = get_settings()
setup_logging(debug=settings.DEBUG_MODE)
logger = logging.getLogger(__name__)
PROJECT_NAME = settings.PROJECT_NAME
ALL_CORS_ORIGINS = settings.all_cors_origins


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    use_redis = get_settings().STORAGE_BACKEND == "redis"
    try:
        if use_redis:
            await redis_manager.init_redis()

        logger.info("Startup complete")
        yield

        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}")
        raise
    finally:
        if use_redis:
            await redis_manager.close_redis()
        logger.info("Shutdown complete")


app = FastAPI(title=PROJECT_NAME, version="0.1.0", lifespan=lifespan)


# Set all CORS enabled origins
if ALL_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALL_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# API Routes
api_router = APIRouter(prefix="/api")
api_router.include_router(trips_router)
api_router.include_router(costs_router)
api_router.include_router(history_router)
api_router.include_router(partners_router)
api_router.include_router(settings_router)
api_router.include_router(day_summary_router)
api_router.include_router(analytics_router)
api_router.include_router(exports_router)
app.include_router(api_router)
app.include_router(health_router)
