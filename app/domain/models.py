"""
Domain models for plant requirements, weather readings and suitability verdicts.

These models represent the core domain entities and should be independent
of any infrastructure concerns (API clients, catalogs on disk, etc.).
All of them are immutable value objects.
"""
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RegionKey(str, Enum):
    """Coarse geographic bucket selecting a sowing calendar."""
    INDIA_SOUTH = "india_south"
    INDIA_NORTH = "india_north"
    INDIA_KHARIF = "india_kharif"


class MonthSuitability(str, Enum):
    """Outcome of the sowing-window check. Only OUT_OF_WINDOW blocks sowing."""
    IN_WINDOW = "in_window"
    OUT_OF_WINDOW = "out_of_window"
    UNKNOWN = "unknown"


class PlantRequirement(BaseModel):
    """Agronomic profile for one species."""
    id: str
    scientific_name: Optional[str] = Field(default=None, alias="scientificName")
    common_name: Optional[str] = Field(default=None, alias="commonName")
    temp_min_c: Optional[float] = Field(default=None, alias="tempMinC")
    temp_max_c: Optional[float] = Field(default=None, alias="tempMaxC")
    humidity_min: Optional[float] = Field(default=None, alias="humidityMin")
    humidity_max: Optional[float] = Field(default=None, alias="humidityMax")
    soil: Optional[str] = None
    sunlight: Optional[str] = None
    sowing_months_by_region: Optional[Dict[str, Tuple[int, ...]]] = Field(
        default=None,
        alias="sowingMonthsByRegion",
        description="Region key -> calendar months (1-12) suitable for sowing",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class WeatherSnapshot(BaseModel):
    """
    Point-in-time weather reading for a location.

    Input accepts both snake_case and camelCase (`tempC`, `windspeedMs`) names;
    output always uses the snake_case field names.
    """
    temp_c: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("temp_c", "tempC"),
        description="Air temperature in °C",
    )
    humidity: Optional[float] = Field(default=None, description="Relative humidity in %")
    windspeed_ms: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("windspeed_ms", "windspeedMs"),
        description="Wind speed in m/s",
    )
    condition: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Verdict(BaseModel):
    """Result of one suitability evaluation."""
    suitable_now: bool
    reasons: List[str] = Field(default_factory=list)
    advice: List[str] = Field(default_factory=list)
    weather: Optional[WeatherSnapshot] = None
    species: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class SuitabilityReport(BaseModel):
    """Verdict for the queried species plus currently viable alternatives."""
    verdict: Verdict
    alternatives: List[str] = Field(default_factory=list)
    region: RegionKey
    month: int = Field(ge=1, le=12)

    model_config = ConfigDict(frozen=True)


class IdentificationResult(BaseModel):
    """Best candidate returned by the identification provider."""
    species: Optional[str] = None
    common_name: Optional[str] = None
    confidence: float = 0.0
    note: Optional[str] = None

    model_config = ConfigDict(frozen=True)
