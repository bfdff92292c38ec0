"""
Unit tests for region classification and the confidence gate.
"""
import pytest

from app.domain.models import RegionKey
from app.services.domain.confidence_gate import (
    MIN_IDENTIFICATION_CONFIDENCE,
    Admitted,
    Rejected,
    RejectionKind,
    admit,
)
from app.services.domain.region_classifier import RegionClassifier


# ============================================================
# Region Classifier Tests
# ============================================================

class TestRegionClassifier:
    """Tests for latitude to region key mapping."""

    def test_missing_latitude_uses_default(self, region_classifier):
        assert region_classifier.classify(None) is RegionKey.INDIA_KHARIF

    @pytest.mark.parametrize("latitude", [8.5241, 13.0827, 15.99, -33.9, 0.0])
    def test_south_of_threshold(self, region_classifier, latitude):
        assert region_classifier.classify(latitude) is RegionKey.INDIA_SOUTH

    @pytest.mark.parametrize("latitude", [16.0, 28.6139, 30.901])
    def test_threshold_and_north(self, region_classifier, latitude):
        assert region_classifier.classify(latitude) is RegionKey.INDIA_NORTH

    def test_threshold_is_configurable(self):
        classifier = RegionClassifier(latitude_threshold=20.0)

        assert classifier.classify(18.5) is RegionKey.INDIA_SOUTH
        assert classifier.classify(21.0) is RegionKey.INDIA_NORTH


# ============================================================
# Confidence Gate Tests
# ============================================================

class TestConfidenceGate:
    """Tests for identification admission."""

    def test_threshold_is_forty_percent(self):
        assert MIN_IDENTIFICATION_CONFIDENCE == 0.40

    @pytest.mark.parametrize("species", [None, ""])
    def test_no_species_is_rejected_first(self, species):
        result = admit(species, 0.99)

        assert isinstance(result, Rejected)
        assert result.kind is RejectionKind.NO_IDENTIFICATION

    def test_no_species_with_zero_confidence(self):
        result = admit(None, 0)

        assert result == Rejected(kind=RejectionKind.NO_IDENTIFICATION, confidence=0.0)

    def test_rejects_just_below_threshold(self):
        result = admit("Oryza sativa", 0.39)

        assert isinstance(result, Rejected)
        assert result.kind is RejectionKind.LOW_CONFIDENCE
        assert result.confidence == 0.39

    def test_admits_at_threshold(self):
        result = admit("Oryza sativa", 0.40)

        assert result == Admitted(species="Oryza sativa", confidence=0.40)

    def test_missing_confidence_counts_as_zero(self):
        result = admit("Oryza sativa", None)

        assert isinstance(result, Rejected)
        assert result.kind is RejectionKind.LOW_CONFIDENCE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
