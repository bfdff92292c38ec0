"""
Infrastructure layer: Plant identification via the Pl@ntNet API.
"""
import logging
from typing import Any, Dict, Optional

from app.config import settings
from app.domain.models import IdentificationResult
from app.infrastructure.api_constants import APIConstants, PlantNetEndpoints
from app.infrastructure.external_api_client import ExternalAPIClient

logger = logging.getLogger(__name__)


NOTE_NO_API_KEY = "no_api_key"
NOTE_LOW_CONFIDENCE_OR_UNKNOWN = "low_confidence_or_unknown"


class PlantIdentificationClient(ExternalAPIClient):
    """
    Client for the Pl@ntNet identify API.

    Only the best-scoring result is used. Results scoring below the
    provider floor are reported without a species.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        min_score: Optional[float] = None,
    ):
        super().__init__(base_url or settings.plantnet_base_url)
        self.api_key = api_key if api_key is not None else settings.plantnet_api_key
        self.min_score = min_score if min_score is not None else settings.plantnet_min_score

    async def identify(self, image: bytes) -> IdentificationResult:
        """
        Identify the plant in a photo.

        Args:
            image: JPEG image bytes

        Returns:
            IdentificationResult; species is None when identification is
            unavailable or unreliable

        Raises:
            ExternalAPIError: If the provider request fails
        """
        if not self.api_key:
            return IdentificationResult(species=None, confidence=0.0, note=NOTE_NO_API_KEY)

        data = await self._make_request(
            "POST",
            PlantNetEndpoints.IDENTIFY_ALL,
            params={"api-key": self.api_key},
            files={
                "images": (
                    APIConstants.DEFAULT_IMAGE_FILENAME,
                    image,
                    APIConstants.CONTENT_TYPE_JPEG,
                ),
            },
            data={"organs": APIConstants.DEFAULT_ORGAN},
        )
        return self.parse_identification(data)

    def parse_identification(self, data: Dict[str, Any]) -> IdentificationResult:
        results = data.get("results")
        best = results[0] if isinstance(results, list) and results else {}
        species_info = best.get("species") or {}

        species = (
            species_info.get("scientificName")
            or (species_info.get("genus") or {}).get("scientificName")
        )
        common_names = species_info.get("commonNames")
        common_name = common_names[0] if isinstance(common_names, list) and common_names else None
        score = best.get("score")
        confidence = float(score) if isinstance(score, (int, float)) else 0.0

        if not species or confidence < self.min_score:
            logger.info(f"Identification below provider floor (score={confidence:.2f})")
            return IdentificationResult(
                species=None,
                confidence=confidence,
                note=NOTE_LOW_CONFIDENCE_OR_UNKNOWN,
            )

        return IdentificationResult(
            species=species,
            common_name=common_name,
            confidence=confidence,
        )


# Singleton instance
_identification_client: Optional[PlantIdentificationClient] = None


def get_identification_client() -> PlantIdentificationClient:
    """
    Get or create the singleton identification client instance.

    Returns:
        PlantIdentificationClient instance
    """
    global _identification_client
    if _identification_client is None:
        _identification_client = PlantIdentificationClient()
    return _identification_client
