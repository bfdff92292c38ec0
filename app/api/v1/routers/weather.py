"""
API router for the weather proxy endpoint.
"""
from typing import Annotated
from fastapi import APIRouter, Query, Request

from app.api.dependencies import SuitabilityServiceDep
from app.api.v1.models.responses import ErrorResponse
from app.domain.models import WeatherSnapshot
from app.middleware.rate_limit import DEFAULT_RATE_LIMIT, limiter


router = APIRouter(
    prefix="/weather",
    tags=["weather"],
)


@router.get(
    "",
    response_model=WeatherSnapshot,
    summary="Get current weather at a location",
    responses={
        429: {
            "description": "Rate limit exceeded",
        },
        503: {
            "model": ErrorResponse,
            "description": "Weather provider failure",
        },
    }
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def get_weather(
    request: Request,
    lat: Annotated[float, Query(ge=-90, le=90, description="Latitude in degrees")],
    lon: Annotated[float, Query(ge=-180, le=180, description="Longitude in degrees")],
    suitability_service: SuitabilityServiceDep,
) -> WeatherSnapshot:
    return await suitability_service.get_weather(lat, lon)
