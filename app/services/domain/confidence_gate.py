"""
Domain service: Admission check for identification results.

Rejects results that name no species or whose confidence is below the
trust threshold, before any agronomic evaluation happens.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# Fixed policy of the engine, not a runtime setting
MIN_IDENTIFICATION_CONFIDENCE = 0.40


class RejectionKind(str, Enum):
    NO_IDENTIFICATION = "no_identification"
    LOW_CONFIDENCE = "low_confidence"


@dataclass(frozen=True)
class Admitted:
    """Identification trusted enough to grade."""
    species: str
    confidence: float


@dataclass(frozen=True)
class Rejected:
    """Identification that must not be graded."""
    kind: RejectionKind
    confidence: float


Admission = Union[Admitted, Rejected]


def admit(species: Optional[str], confidence: Optional[float]) -> Admission:
    """
    Decide whether an identification result may enter the pipeline.

    Args:
        species: Identified species name, or None
        confidence: Provider confidence in [0, 1]

    Returns:
        Admitted, or Rejected carrying the rejection kind and confidence
    """
    score = confidence or 0.0
    if not species:
        return Rejected(kind=RejectionKind.NO_IDENTIFICATION, confidence=score)
    if score < MIN_IDENTIFICATION_CONFIDENCE:
        return Rejected(kind=RejectionKind.LOW_CONFIDENCE, confidence=score)
    return Admitted(species=species, confidence=score)
