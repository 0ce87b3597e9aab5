from fastapi import APIRouter, Depends, HTTPException

from cafe_booking.app.core import http_client as http_module
from cafe_booking.app.core.config import Settings, get_settings

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, bool]:
    """Basic liveness probe."""
    return {"ok": True}


@router.get("/readiness")
async def readiness(settings: Settings = Depends(get_settings)) -> dict[str, bool]:
    """Ensure reservations can be delivered (or simulated)."""
    if not settings.dry_run and http_module.http_client is None:
        raise HTTPException(status_code=503, detail="Outbound HTTP client unavailable")
    return {"ready": True, "dry_run": settings.dry_run}
