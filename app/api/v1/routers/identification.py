"""
API router for photo identification endpoints.
"""
from fastapi import APIRouter, Request

from app.api.dependencies import SuitabilityServiceDep
from app.api.v1.models.requests import AssessRequest, IdentifyRequest
from app.api.v1.models.responses import (
    AssessmentResponse,
    ErrorResponse,
    IdentificationResponse,
    SuitabilityResponse,
)
from app.middleware.rate_limit import DEFAULT_RATE_LIMIT, limiter


router = APIRouter(
    tags=["identification"],
)


@router.post(
    "/identify",
    response_model=IdentificationResponse,
    summary="Identify the plant in a photo",
    responses={
        400: {"description": "Invalid base64 image"},
        429: {"description": "Rate limit exceeded"},
        502: {"description": "Identification provider failure"},
    }
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def identify_plant(
    request: Request,
    payload: IdentifyRequest,
    suitability_service: SuitabilityServiceDep,
) -> IdentificationResponse:
    """
    Identify a plant species from a photo.

    Returns a null species when no API key is configured or the provider
    result is unreliable.
    """
    identification = await suitability_service.identify(payload.image_bytes())
    return IdentificationResponse.model_validate(identification.model_dump())


@router.post(
    "/assess",
    response_model=AssessmentResponse,
    summary="Identify a plant and assess whether to sow it now",
    description="""
    Full photo-to-advice flow: identify the plant, then run the suitability
    assessment for the grower's location. Error bodies include the
    identification when one was obtained.
    """,
    responses={
        400: {"description": "Invalid base64 image"},
        422: {
            "model": ErrorResponse,
            "description": "No identification, low confidence, or invalid request",
        },
        429: {"description": "Rate limit exceeded"},
        502: {"description": "Identification provider failure"},
        503: {
            "model": ErrorResponse,
            "description": "Weather could not be loaded for the location",
        },
    }
)
@limiter.limit(DEFAULT_RATE_LIMIT)
async def assess_photo(
    request: Request,
    payload: AssessRequest,
    suitability_service: SuitabilityServiceDep,
) -> AssessmentResponse:
    identification, report = await suitability_service.identify_and_assess(
        payload.image_bytes(),
        latitude=payload.latitude,
        longitude=payload.longitude,
    )
    return AssessmentResponse(
        identification=IdentificationResponse.model_validate(identification.model_dump()),
        suitability=SuitabilityResponse.from_report(report),
    )
