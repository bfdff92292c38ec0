"""
API router for sowing suitability endpoints.
"""
from fastapi import APIRouter, Request

from app.api.dependencies import SuitabilityServiceDep
from app.api.v1.models.requests import SuitabilityRequest
from app.api.v1.models.responses import ErrorResponse, SuitabilityResponse
from app.middleware.rate_limit import DEFAULT_RATE_LIMIT, limiter


router = APIRouter(
    prefix="/suitability",
    tags=["suitability"],
)


@router.post(
    "",
    response_model=SuitabilityResponse,
    summary="Assess whether now is a good time to sow a species",
    description="""
    Decide whether the current conditions at a location suit sowing a species.

    This endpoint:
    1. Rejects identifications without a species or below 40% confidence
    2. Fetches current weather for the location unless it is supplied
    3. Selects the regional sowing calendar from the latitude
    4. Checks temperature, humidity and the sowing window
    5. Suggests up to three alternative crops when the species is unsuitable
    """,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "No identification, low confidence, or invalid request",
        },
        429: {
            "description": "Rate limit exceeded",
        },
        503: {
            "model": ErrorResponse,
            "description": "Weather could not be loaded for the location",
        },
    }
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def assess_suitability(
    request: Request,
    payload: SuitabilityRequest,
    suitability_service: SuitabilityServiceDep,
) -> SuitabilityResponse:
    """
    Assess sowing suitability for a species.

    Args:
        request: Incoming request (used for rate limiting)
        payload: Species, confidence, location and optional weather
        suitability_service: Suitability service (injected dependency)

    Returns:
        SuitabilityResponse with verdict and alternatives
    """
    # Delegate to service layer; pipeline errors are rendered by the middleware
    report = await suitability_service.assess(
        species=payload.species,
        confidence=payload.confidence,
        latitude=payload.latitude,
        longitude=payload.longitude,
        weather=payload.weather,
    )
    return SuitabilityResponse.from_report(report)
