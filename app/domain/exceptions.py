"""
Domain errors raised by the suitability pipeline.

Each error carries a distinguishable ``kind`` so the boundary layer can
render a precise message instead of a generic failure.
"""
from typing import Any, Dict, Optional


class SuitabilityPipelineError(Exception):
    """Base class for errors that terminate a suitability request."""

    kind = "pipeline_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # Identification already obtained when the error was raised, if any
        self.identification: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {"error": self.kind, "detail": self.message}
        if self.identification is not None:
            payload["identification"] = self.identification
        return payload


class NoIdentificationError(SuitabilityPipelineError):
    """No species could be resolved from the identification result."""

    kind = "no_identification"
    status_code = 422

    def __init__(self, message: str = "Could not identify a plant. Please try a clearer plant photo."):
        super().__init__(message)


class LowConfidenceError(SuitabilityPipelineError):
    """A species was resolved but its confidence is below the trust threshold."""

    kind = "low_confidence"
    status_code = 422

    def __init__(self, confidence: float):
        super().__init__(
            f"Low confidence identification ({round(confidence * 100)}%). "
            "Please provide a clearer photo or try again."
        )
        self.confidence = confidence

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["confidence"] = self.confidence
        return payload


class WeatherUnavailableError(SuitabilityPipelineError):
    """Weather was required for the evaluation but could not be obtained."""

    kind = "weather_unavailable"
    status_code = 503

    def __init__(self, message: str = "Could not load weather for suitability"):
        super().__init__(message)
