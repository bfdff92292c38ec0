"""
Domain service: Map a latitude to the region key selecting a sowing calendar.
"""
from typing import Optional

from app.domain.models import RegionKey


DEFAULT_LATITUDE_THRESHOLD = 16.0


class RegionClassifier:
    """Stateless latitude split between the southern and northern calendars."""

    def __init__(self, latitude_threshold: float = DEFAULT_LATITUDE_THRESHOLD):
        self.latitude_threshold = latitude_threshold

    def classify(self, latitude: Optional[float]) -> RegionKey:
        if latitude is None:
            return RegionKey.INDIA_KHARIF
        if latitude < self.latitude_threshold:
            return RegionKey.INDIA_SOUTH
        return RegionKey.INDIA_NORTH
