"""API router definitions."""

from fastapi import APIRouter

from .weather_forecast import router as weather_forecast_router

router = APIRouter()


@router.get("/health", tags=["system"], include_in_schema=False)
def healthcheck() -> dict[str, str]:
    """Return basic service health information."""

    return {"status": "ok"}


router.include_router(weather_forecast_router)
