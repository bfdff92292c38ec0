"""
Unit tests for the suitability application service.

Tests cover:
- Confidence gate short-circuiting
- Weather resolution and weather_unavailable errors
- Region and month selection
- Recommender invocation policy
- Photo identification flow
"""
import pytest

from app.domain.exceptions import (
    LowConfidenceError,
    NoIdentificationError,
    WeatherUnavailableError,
)
from app.domain.models import IdentificationResult, RegionKey, WeatherSnapshot
from app.infrastructure.external_api_client import ExternalAPIError
from app.services.domain.alternative_recommender import AlternativeRecommender
from app.services.domain.suitability_evaluator import (
    REASON_SOWING_WINDOW,
    REASON_TEMPERATURE_LOW,
)


# ============================================================
# Confidence Gate Integration Tests
# ============================================================

class TestGate:
    """Tests for requests stopped before evaluation."""

    @pytest.mark.asyncio
    async def test_no_species_stops_everything(self, make_service, mock_weather_client, mock_recommender):
        service = make_service()

        with pytest.raises(NoIdentificationError) as exc_info:
            await service.assess(None, 0, latitude=13.08, longitude=80.27)

        assert exc_info.value.kind == "no_identification"
        mock_weather_client.get_current_weather.assert_not_called()
        mock_recommender.recommend.assert_not_called()

    @pytest.mark.asyncio
    async def test_low_confidence_carries_confidence(self, make_service, mock_weather_client):
        service = make_service()

        with pytest.raises(LowConfidenceError) as exc_info:
            await service.assess("Oryza sativa", 0.39, latitude=13.08, longitude=80.27)

        assert exc_info.value.confidence == 0.39
        assert exc_info.value.to_dict()["confidence"] == 0.39
        assert "39%" in exc_info.value.message
        mock_weather_client.get_current_weather.assert_not_called()


# ============================================================
# Weather Resolution Tests
# ============================================================

class TestWeatherResolution:
    """Tests for fetching or reusing weather."""

    @pytest.mark.asyncio
    async def test_fetches_weather_for_location(self, make_service, mock_weather_client, mild_weather):
        service = make_service(month=7)

        report = await service.assess("paddy", 0.9, latitude=13.08, longitude=80.27)

        mock_weather_client.get_current_weather.assert_awaited_once_with(13.08, 80.27)
        assert report.verdict.weather == mild_weather

    @pytest.mark.asyncio
    async def test_supplied_weather_is_not_refetched(self, make_service, mock_weather_client):
        service = make_service(month=7)
        supplied = WeatherSnapshot(temp_c=10, humidity=70)

        report = await service.assess("paddy", 0.9, latitude=13.08, longitude=80.27, weather=supplied)

        mock_weather_client.get_current_weather.assert_not_called()
        assert report.verdict.reasons == [REASON_TEMPERATURE_LOW]

    @pytest.mark.asyncio
    async def test_no_location_and_no_weather_evaluates_calendar_only(self, make_service, mock_weather_client):
        service = make_service(month=1)

        report = await service.assess("paddy", 0.9)

        mock_weather_client.get_current_weather.assert_not_called()
        assert report.region is RegionKey.INDIA_KHARIF
        assert report.verdict.weather is None
        # Rice only has a southern calendar, which does not list January
        assert report.verdict.suitable_now is True

    @pytest.mark.asyncio
    async def test_provider_failure_is_weather_unavailable(self, make_service, mock_weather_client, mock_recommender):
        mock_weather_client.get_current_weather.side_effect = ExternalAPIError("boom", status_code=502)
        service = make_service()

        with pytest.raises(WeatherUnavailableError) as exc_info:
            await service.assess("paddy", 0.9, latitude=13.08, longitude=80.27)

        assert exc_info.value.kind == "weather_unavailable"
        assert exc_info.value.status_code == 503
        mock_recommender.recommend.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_weather_wraps_failures(self, make_service, mock_weather_client):
        mock_weather_client.get_current_weather.side_effect = ExternalAPIError("timeout")
        service = make_service()

        with pytest.raises(WeatherUnavailableError):
            await service.get_weather(28.61, 77.20)


# ============================================================
# Evaluation and Recommendation Tests
# ============================================================

class TestAssess:
    """Tests for the full suitability pipeline."""

    @pytest.mark.asyncio
    async def test_suitable_species_skips_recommender(self, make_service, mock_recommender):
        service = make_service(month=7)

        report = await service.assess("Oryza sativa", 0.85, latitude=13.08, longitude=80.27)

        assert report.verdict.suitable_now is True
        assert report.verdict.species == "Oryza sativa"
        assert report.alternatives == []
        assert report.region is RegionKey.INDIA_SOUTH
        assert report.month == 7
        mock_recommender.recommend.assert_not_called()

    @pytest.mark.asyncio
    async def test_unsuitable_species_gets_alternatives(self, make_service, mock_recommender, mild_weather):
        service = make_service(month=3)

        report = await service.assess("Oryza sativa", 0.85, latitude=13.08, longitude=80.27)

        assert report.verdict.suitable_now is False
        assert report.verdict.reasons == [REASON_SOWING_WINDOW]
        assert report.alternatives == ["tomato"]
        mock_recommender.recommend.assert_awaited_once_with(
            mild_weather, RegionKey.INDIA_SOUTH, 3, exclude_species="Oryza sativa"
        )

    @pytest.mark.asyncio
    async def test_admits_confidence_at_threshold(self, make_service):
        service = make_service(month=7)

        report = await service.assess("tomato", 0.40, latitude=28.61, longitude=77.20)

        assert report.region is RegionKey.INDIA_NORTH
        assert report.verdict.suitable_now is True

    @pytest.mark.asyncio
    async def test_real_recommender_returns_catalog_order(
        self, make_service, sample_catalog, evaluator
    ):
        recommender = AlternativeRecommender(
            catalog=sample_catalog,
            evaluator=evaluator,
            candidates=["tomato", "paddy", "okra", "finger millet"],
        )
        service = make_service(month=3, recommender=recommender)

        report = await service.assess(
            "paddy", 0.9, weather=WeatherSnapshot(temp_c=26, humidity=65), latitude=10.0, longitude=77.0
        )

        assert report.verdict.suitable_now is False
        assert report.alternatives == ["tomato", "okra", "finger millet"]


# ============================================================
# Identification Flow Tests
# ============================================================

class TestIdentifyAndAssess:
    """Tests for the photo-to-advice flow."""

    @pytest.mark.asyncio
    async def test_identifies_then_assesses(self, make_service, mock_identification_client):
        mock_identification_client.identify.return_value = IdentificationResult(
            species="Solanum lycopersicum", common_name="Tomato", confidence=0.74
        )
        service = make_service(month=7)

        identification, report = await service.identify_and_assess(b"jpeg", latitude=13.0, longitude=80.0)

        mock_identification_client.identify.assert_awaited_once_with(b"jpeg")
        assert identification.common_name == "Tomato"
        assert report.verdict.species == "Solanum lycopersicum"
        assert report.verdict.suitable_now is True

    @pytest.mark.asyncio
    async def test_gate_error_carries_identification(self, make_service, mock_identification_client):
        mock_identification_client.identify.return_value = IdentificationResult(
            species="Solanum lycopersicum", confidence=0.25
        )
        service = make_service()

        with pytest.raises(LowConfidenceError) as exc_info:
            await service.identify_and_assess(b"jpeg", latitude=13.0, longitude=80.0)

        payload = exc_info.value.to_dict()
        assert payload["error"] == "low_confidence"
        assert payload["identification"]["species"] == "Solanum lycopersicum"

    @pytest.mark.asyncio
    async def test_unidentified_photo(self, make_service, mock_identification_client):
        mock_identification_client.identify.return_value = IdentificationResult(
            species=None, confidence=0.0, note="no_api_key"
        )
        service = make_service()

        with pytest.raises(NoIdentificationError) as exc_info:
            await service.identify_and_assess(b"jpeg")

        assert exc_info.value.to_dict()["identification"]["note"] == "no_api_key"

    @pytest.mark.asyncio
    async def test_identify_without_client(self, make_service):
        service = make_service(identification_client=None)

        with pytest.raises(ValueError):
            await service.identify(b"jpeg")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
