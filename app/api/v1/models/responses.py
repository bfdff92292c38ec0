"""
API response models using Pydantic.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from app.domain.models import (
    IdentificationResult,
    RegionKey,
    SuitabilityReport,
    WeatherSnapshot,
)


class SuitabilityResponse(BaseModel):
    """Response model for the suitability endpoint."""
    species: Optional[str] = Field(
        description="Species the verdict is about"
    )
    suitable_now: bool = Field(
        description="Whether sowing is recommended right now"
    )
    reasons: List[str] = Field(
        description="Violated constraints, empty when suitable"
    )
    advice: List[str] = Field(
        description="Actionable suggestions, empty when suitable"
    )
    weather: Optional[WeatherSnapshot] = Field(
        default=None,
        description="Weather reading the verdict was based on"
    )
    alternatives: List[str] = Field(
        description="Crops suitable to sow now instead, empty when suitable"
    )
    region: RegionKey = Field(
        description="Region whose sowing calendar was used"
    )
    month: int = Field(
        description="Calendar month the verdict applies to"
    )

    @classmethod
    def from_report(cls, report: SuitabilityReport) -> "SuitabilityResponse":
        verdict = report.verdict
        return cls(
            species=verdict.species,
            suitable_now=verdict.suitable_now,
            reasons=list(verdict.reasons),
            advice=list(verdict.advice),
            weather=verdict.weather,
            alternatives=list(report.alternatives),
            region=report.region,
            month=report.month,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "species": "Oryza sativa",
                "suitable_now": False,
                "reasons": ["Not in recommended sowing window for your region"],
                "advice": [
                    "Aim for 20-35 °C",
                    "Soil: Clay loam, good water retention",
                    "Sunlight: Full sun",
                    "Consider waiting until the local sowing window opens",
                ],
                "weather": {"temp_c": 29.0, "humidity": 74.0, "windspeed_ms": 3.1},
                "alternatives": ["tomato", "chili", "okra"],
                "region": "india_south",
                "month": 3,
            }
        }


class IdentificationResponse(IdentificationResult):
    """Response model for the identify endpoint."""


class AssessmentResponse(BaseModel):
    """Response model for the photo-to-advice endpoint."""
    identification: IdentificationResponse
    suitability: SuitabilityResponse


class ErrorResponse(BaseModel):
    """Error body returned for terminated requests."""
    error: str = Field(
        description="Machine-readable error kind",
        examples=["low_confidence"],
    )
    detail: str
    confidence: Optional[float] = None
    identification: Optional[IdentificationResult] = None
