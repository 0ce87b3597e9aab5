import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cafe_booking.app.core.config import settings
from cafe_booking.app.core.http_client import close_http_client, init_http_client
import cafe_booking.app.routers.health as health
import cafe_booking.app.routers.reservations as reservations

logging.basicConfig(level=settings.LOG_LEVEL, stream=sys.stdout, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s reservation system loaded", settings.CAFE_NAME)
    if settings.dry_run:
        logger.warning("APPS_SCRIPT_URL is not configured; reservations run in dry-run mode")
        logger.warning("Set APPS_SCRIPT_URL to the deployed web app URL once it is published")
    await init_http_client()
    try:
        yield
    finally:
        await close_http_client()


app = FastAPI(
    title="Cafe Reservation API",
    lifespan=lifespan,
)

app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(reservations.router, prefix=settings.API_PREFIX)
