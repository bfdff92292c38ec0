"""
Application service: Orchestration layer for sowing suitability requests.
"""
import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from pydantic import ValidationError

from app.domain.exceptions import (
    LowConfidenceError,
    NoIdentificationError,
    SuitabilityPipelineError,
    WeatherUnavailableError,
)
from app.domain.models import IdentificationResult, SuitabilityReport, WeatherSnapshot
from app.infrastructure.external_api_client import ExternalAPIError
from app.infrastructure.identification_client import PlantIdentificationClient
from app.infrastructure.weather_client import WeatherClient
from app.services.domain.alternative_recommender import AlternativeRecommender
from app.services.domain.confidence_gate import RejectionKind, Rejected, admit
from app.services.domain.region_classifier import RegionClassifier
from app.services.domain.requirement_catalog import RequirementCatalog
from app.services.domain.suitability_evaluator import SuitabilityEvaluator

logger = logging.getLogger(__name__)


class SuitabilityService:
    """
    Application service for suitability requests.

    Orchestrates data fetching and business logic execution.
    Follows the application layer pattern - no business logic here,
    only coordination between infrastructure and domain layers.
    """

    def __init__(
        self,
        catalog: RequirementCatalog,
        evaluator: SuitabilityEvaluator,
        region_classifier: RegionClassifier,
        recommender: AlternativeRecommender,
        weather_client: WeatherClient,
        identification_client: Optional[PlantIdentificationClient] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the service with dependencies.

        Args:
            catalog: Read-only requirement catalog
            evaluator: Suitability evaluator
            region_classifier: Latitude to region key mapping
            recommender: Alternative crop recommender
            weather_client: Current weather provider
            identification_client: Plant identification provider
            clock: Source of the current date (month of the request)
        """
        self.catalog = catalog
        self.evaluator = evaluator
        self.region_classifier = region_classifier
        self.recommender = recommender
        self.weather_client = weather_client
        self.identification_client = identification_client
        self.clock = clock

    async def _resolve_weather(
        self,
        weather: Optional[WeatherSnapshot],
        latitude: Optional[float],
        longitude: Optional[float],
    ) -> Optional[WeatherSnapshot]:
        if weather is not None:
            return weather
        if latitude is None or longitude is None:
            return None
        try:
            return await self.weather_client.get_current_weather(latitude, longitude)
        except (ExternalAPIError, ValidationError) as e:
            logger.warning(f"Weather unavailable for ({latitude}, {longitude}): {e}")
            raise WeatherUnavailableError()

    async def get_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """
        Fetch the current weather at a location.

        Raises:
            WeatherUnavailableError: If the provider fails
        """
        return await self._resolve_weather(None, latitude, longitude)

    async def assess(
        self,
        species: Optional[str],
        confidence: Optional[float],
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        weather: Optional[WeatherSnapshot] = None,
    ) -> SuitabilityReport:
        """
        Decide whether now is a good time to sow a species at a location.

        This method orchestrates:
        1. Admitting the identification through the confidence gate
        2. Fetching weather when the caller did not supply it
        3. Classifying the region and evaluating suitability
        4. Searching for alternatives when the species is unsuitable

        Args:
            species: Identified species or common name
            confidence: Identification confidence in [0, 1]
            latitude: Grower latitude in degrees
            longitude: Grower longitude in degrees
            weather: Weather reading supplied by the caller

        Returns:
            SuitabilityReport with the verdict and any alternatives

        Raises:
            NoIdentificationError: If no species was given
            LowConfidenceError: If the confidence is below the threshold
            WeatherUnavailableError: If weather was needed but could not be fetched
        """
        admission = admit(species, confidence)
        if isinstance(admission, Rejected):
            logger.info(f"Identification rejected: {admission.kind.value} (confidence={admission.confidence:.2f})")
            if admission.kind is RejectionKind.NO_IDENTIFICATION:
                raise NoIdentificationError()
            raise LowConfidenceError(admission.confidence)

        current = await self._resolve_weather(weather, latitude, longitude)
        region = self.region_classifier.classify(latitude)
        month = self.clock().month

        requirements = self.catalog.requirements_for(admission.species)
        verdict = self.evaluator.evaluate(
            requirements, current, region, month, species=admission.species
        )
        logger.info(
            f"Verdict for '{admission.species}' in {region.value} month {month}: "
            f"suitable_now={verdict.suitable_now}"
        )

        alternatives = []
        if not verdict.suitable_now:
            alternatives = await self.recommender.recommend(
                current, region, month, exclude_species=admission.species
            )

        return SuitabilityReport(
            verdict=verdict,
            alternatives=alternatives,
            region=region,
            month=month,
        )

    async def identify(self, image: bytes) -> IdentificationResult:
        """Identify the plant in a photo."""
        if self.identification_client is None:
            raise ValueError("Plant identification is not configured")
        return await self.identification_client.identify(image)

    async def identify_and_assess(
        self,
        image: bytes,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> Tuple[IdentificationResult, SuitabilityReport]:
        """
        Identify the plant in a photo and assess sowing suitability for it.

        Pipeline errors carry the identification that was already obtained.

        Raises:
            ExternalAPIError: If identification fails
            SuitabilityPipelineError: If the suitability pipeline stops
        """
        identification = await self.identify(image)
        try:
            report = await self.assess(
                identification.species,
                identification.confidence,
                latitude=latitude,
                longitude=longitude,
            )
        except SuitabilityPipelineError as e:
            e.identification = identification.model_dump()
            raise
        return identification, report
