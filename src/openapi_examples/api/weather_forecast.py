"""Weather forecast routes."""

import logging
from uuid import UUID

from fastapi import APIRouter, Response

from .errors import ValidationProblem

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/WeatherForecast", tags=["WeatherForecast"])


@router.get(
    "/{id}",
    operation_id="get_weather_forecast",
    response_class=Response,
    responses={
        400: {
            "model": ValidationProblem,
            "description": "The identifier is not a valid UUID",
        }
    },
)
def get_weather_forecast(id: UUID) -> Response:  # noqa: A002
    # Nothing backs the identifier, every well-formed id is acknowledged.
    LOGGER.debug("Weather forecast requested for %s", id)
    return Response(status_code=200)
