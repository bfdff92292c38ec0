"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from app.config import settings
from app.infrastructure.identification_client import (
    PlantIdentificationClient,
    get_identification_client,
)
from app.infrastructure.weather_client import WeatherClient, get_weather_client
from app.services.application.suitability_service import SuitabilityService
from app.services.domain.alternative_recommender import AlternativeRecommender
from app.services.domain.region_classifier import RegionClassifier
from app.services.domain.requirement_catalog import (
    RequirementCatalog,
    get_requirement_catalog,
)
from app.services.domain.suitability_evaluator import SuitabilityEvaluator


def get_suitability_evaluator() -> SuitabilityEvaluator:
    """
    Dependency factory for SuitabilityEvaluator.

    Returns:
        SuitabilityEvaluator instance
    """
    return SuitabilityEvaluator()


def get_region_classifier() -> RegionClassifier:
    """
    Dependency factory for RegionClassifier.

    Returns:
        RegionClassifier using the configured latitude threshold
    """
    return RegionClassifier(latitude_threshold=settings.region_latitude_threshold)


def get_alternative_recommender(
    catalog: Annotated[RequirementCatalog, Depends(get_requirement_catalog)],
    evaluator: Annotated[SuitabilityEvaluator, Depends(get_suitability_evaluator)],
) -> AlternativeRecommender:
    """
    Dependency factory for AlternativeRecommender.

    Args:
        catalog: Requirement catalog (injected)
        evaluator: Suitability evaluator (injected)

    Returns:
        AlternativeRecommender over the configured candidate list
    """
    return AlternativeRecommender(
        catalog=catalog,
        evaluator=evaluator,
        candidates=settings.alternative_candidates,
        max_alternatives=settings.max_alternatives,
    )


def get_suitability_service(
    catalog: Annotated[RequirementCatalog, Depends(get_requirement_catalog)],
    evaluator: Annotated[SuitabilityEvaluator, Depends(get_suitability_evaluator)],
    region_classifier: Annotated[RegionClassifier, Depends(get_region_classifier)],
    recommender: Annotated[AlternativeRecommender, Depends(get_alternative_recommender)],
    weather_client: Annotated[WeatherClient, Depends(get_weather_client)],
    identification_client: Annotated[PlantIdentificationClient, Depends(get_identification_client)],
) -> SuitabilityService:
    """
    Dependency factory for SuitabilityService.

    Returns:
        SuitabilityService instance
    """
    return SuitabilityService(
        catalog=catalog,
        evaluator=evaluator,
        region_classifier=region_classifier,
        recommender=recommender,
        weather_client=weather_client,
        identification_client=identification_client,
    )


# Type aliases for cleaner route signatures
SuitabilityServiceDep = Annotated[SuitabilityService, Depends(get_suitability_service)]
