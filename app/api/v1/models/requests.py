"""
API request models using Pydantic.
"""
import base64
import binascii
from typing import Optional
from pydantic import BaseModel, Field

from app.domain.models import WeatherSnapshot


class SuitabilityRequest(BaseModel):
    """Request model for the suitability endpoint."""
    species: Optional[str] = Field(
        default=None,
        description="Scientific or common name of the plant",
        examples=["Oryza sativa"],
    )
    confidence: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Identification confidence; names typed by the grower are fully trusted",
    )
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    weather: Optional[WeatherSnapshot] = Field(
        default=None,
        description="Current weather; fetched for the location when omitted",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "species": "Oryza sativa",
                "confidence": 0.82,
                "latitude": 13.0827,
                "longitude": 80.2707,
            }
        }


class ImagePayload(BaseModel):
    """Base64-encoded plant photo."""
    image_base64: str = Field(
        min_length=1,
        description="JPEG image encoded as base64",
    )

    def image_bytes(self) -> bytes:
        """
        Decode the image payload.

        Raises:
            ValueError: If the payload is not valid base64
        """
        try:
            return base64.b64decode(self.image_base64, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("image_base64 is not valid base64")


class IdentifyRequest(ImagePayload):
    """Request model for the identify endpoint."""


class AssessRequest(ImagePayload):
    """Request model for the photo-to-advice endpoint."""
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
