"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Sample requirement profiles and catalogs
- Sample weather readings
- Domain services wired for unit tests
- Mock weather and identification clients
- FastAPI test client
"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from app.main import app
from app.domain.models import PlantRequirement, WeatherSnapshot
from app.infrastructure.identification_client import PlantIdentificationClient
from app.infrastructure.weather_client import OpenWeatherClient
from app.services.application.suitability_service import SuitabilityService
from app.services.domain.alternative_recommender import AlternativeRecommender
from app.services.domain.region_classifier import RegionClassifier
from app.services.domain.requirement_catalog import RequirementCatalog
from app.services.domain.suitability_evaluator import SuitabilityEvaluator


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def rice_requirement() -> PlantRequirement:
    """Paddy profile with a southern and northern sowing calendar."""
    return PlantRequirement(
        id="rice",
        scientific_name="Oryza sativa",
        common_name="Rice (Paddy)",
        temp_min_c=20,
        temp_max_c=35,
        humidity_min=50,
        humidity_max=90,
        soil="Clay loam, good water retention",
        sunlight="Full sun",
        sowing_months_by_region={
            "india_south": (6, 7, 8),
            "india_north": (5, 6),
        },
    )


@pytest.fixture
def catalog_records() -> list[dict]:
    """Raw catalog records in the on-disk (camelCase) schema."""
    return [
        {
            "id": "rice",
            "scientificName": "Oryza sativa",
            "commonName": "Rice (Paddy)",
            "tempMinC": 20,
            "tempMaxC": 35,
            "humidityMin": 50,
            "humidityMax": 90,
            "sowingMonthsByRegion": {"india_south": [6, 7, 8]},
        },
        {
            "id": "finger_millet",
            "scientificName": "Eleusine coracana",
            "commonName": "Finger millet (Ragi)",
            "tempMinC": 20,
            "tempMaxC": 32,
        },
        {
            "id": "okra",
            "scientificName": "Abelmoschus esculentus",
            "commonName": "Okra (Lady's finger)",
            "tempMinC": 22,
            "tempMaxC": 35,
        },
        {
            "id": "tomato",
            "scientificName": "Solanum lycopersicum",
            "commonName": "Tomato",
            "tempMinC": 18,
            "tempMaxC": 30,
        },
    ]


@pytest.fixture
def sample_catalog(catalog_records) -> RequirementCatalog:
    """Small in-memory catalog."""
    return RequirementCatalog.from_records(catalog_records)


@pytest.fixture
def mild_weather() -> WeatherSnapshot:
    """Weather inside every sample profile's bands."""
    return WeatherSnapshot(temp_c=26, humidity=65, windspeed_ms=2.5)


# ============================================================
# Service Fixtures
# ============================================================

@pytest.fixture
def evaluator() -> SuitabilityEvaluator:
    return SuitabilityEvaluator()


@pytest.fixture
def region_classifier() -> RegionClassifier:
    return RegionClassifier()


@pytest.fixture
def mock_weather_client(mild_weather):
    """Create a mock weather client."""
    mock_client = AsyncMock(spec=OpenWeatherClient)
    mock_client.get_current_weather.return_value = mild_weather
    return mock_client


@pytest.fixture
def mock_identification_client():
    """Create a mock identification client."""
    return AsyncMock(spec=PlantIdentificationClient)


@pytest.fixture
def mock_recommender():
    """Create a mock alternative recommender."""
    mock = AsyncMock(spec=AlternativeRecommender)
    mock.recommend.return_value = ["tomato"]
    return mock


@pytest.fixture
def make_service(
    sample_catalog,
    evaluator,
    region_classifier,
    mock_recommender,
    mock_weather_client,
    mock_identification_client,
):
    """Factory building a SuitabilityService with a fixed month."""
    def _make(month: int = 7, **overrides) -> SuitabilityService:
        dependencies = {
            "catalog": sample_catalog,
            "evaluator": evaluator,
            "region_classifier": region_classifier,
            "recommender": mock_recommender,
            "weather_client": mock_weather_client,
            "identification_client": mock_identification_client,
            "clock": lambda: datetime(2025, month, 15, 9, 0),
        }
        dependencies.update(overrides)
        return SuitabilityService(**dependencies)

    return _make


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture
def test_client() -> TestClient:
    """Create a synchronous test client for FastAPI."""
    return TestClient(app)
