"""
Domain service: Sowing suitability evaluation.

Turns a requirement profile, a weather reading, a region key and a
calendar month into a Verdict. Every check runs independently; a failing
check marks the verdict unsuitable and appends one reason. Missing data
never disqualifies a species:
- temperature is only checked when the reading has a temperature
- humidity is only checked when the reading has humidity and the
  profile defines both bounds
- the sowing window only blocks when the calendar explicitly excludes
  the month
"""
import logging
from typing import Mapping, Optional, Sequence

from app.domain.models import (
    MonthSuitability,
    PlantRequirement,
    RegionKey,
    Verdict,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)


REASON_TEMPERATURE_LOW = "Temperature is below optimal range"
REASON_TEMPERATURE_HIGH = "Temperature is above optimal range"
REASON_HUMIDITY = "Humidity outside ideal range"
REASON_SOWING_WINDOW = "Not in recommended sowing window for your region"

ADVICE_WAIT_FOR_WINDOW = "Consider waiting until the local sowing window opens"


def month_suitable(
    sowing_months_by_region: Optional[Mapping[str, Sequence[int]]],
    region: RegionKey,
    month: int,
) -> MonthSuitability:
    """
    Judge whether a month falls inside the sowing window for a region.

    The region's own calendar is authoritative when present. Without one,
    any other region listing the month counts as in-window.

    Args:
        sowing_months_by_region: Region key -> sowing months, or None
        region: Region the grower is in
        month: Calendar month (1-12)

    Returns:
        IN_WINDOW, OUT_OF_WINDOW, or UNKNOWN when there is nothing to judge by
    """
    if sowing_months_by_region is None:
        return MonthSuitability.UNKNOWN

    region_months = sowing_months_by_region.get(RegionKey(region).value)
    if region_months is not None:
        if month in region_months:
            return MonthSuitability.IN_WINDOW
        return MonthSuitability.OUT_OF_WINDOW

    if any(month in months for months in sowing_months_by_region.values()):
        return MonthSuitability.IN_WINDOW
    return MonthSuitability.UNKNOWN


def _format_bound(value: Optional[float]) -> str:
    if value is None:
        return "?"
    return f"{value:g}"


class SuitabilityEvaluator:
    """
    Pure decision function over (requirements, weather, region, month).

    Holds no state; identical inputs always yield identical verdicts.
    """

    def evaluate(
        self,
        requirements: PlantRequirement,
        weather: Optional[WeatherSnapshot],
        region: RegionKey,
        month: int,
        species: Optional[str] = None,
    ) -> Verdict:
        """
        Evaluate whether sowing is suitable right now.

        Args:
            requirements: Agronomic profile of the species
            weather: Current weather reading (may be None or partial)
            region: Region key selecting the sowing calendar
            month: Calendar month (1-12)
            species: Species name echoed in the verdict

        Returns:
            Verdict with reasons and advice populated only when unsuitable
        """
        region = RegionKey(region)
        reading = weather or WeatherSnapshot()
        reasons = []

        temperature = reading.temp_c
        if temperature is not None:
            if requirements.temp_min_c is not None and temperature < requirements.temp_min_c:
                reasons.append(REASON_TEMPERATURE_LOW)
            if requirements.temp_max_c is not None and temperature > requirements.temp_max_c:
                reasons.append(REASON_TEMPERATURE_HIGH)

        humidity = reading.humidity
        if (
            humidity is not None
            and requirements.humidity_min is not None
            and requirements.humidity_max is not None
        ):
            if humidity < requirements.humidity_min or humidity > requirements.humidity_max:
                reasons.append(REASON_HUMIDITY)

        month_check = month_suitable(requirements.sowing_months_by_region, region, month)
        if month_check is MonthSuitability.OUT_OF_WINDOW:
            reasons.append(REASON_SOWING_WINDOW)

        if not reasons:
            return Verdict(suitable_now=True, weather=weather, species=species)

        advice = []
        if temperature is not None:
            advice.append(
                f"Aim for {_format_bound(requirements.temp_min_c)}-"
                f"{_format_bound(requirements.temp_max_c)} °C"
            )
        if requirements.soil:
            advice.append(f"Soil: {requirements.soil}")
        if requirements.sunlight:
            advice.append(f"Sunlight: {requirements.sunlight}")
        if month_check is MonthSuitability.OUT_OF_WINDOW:
            advice.append(ADVICE_WAIT_FOR_WINDOW)

        logger.debug(f"'{species}' unsuitable in {region.value} month {month}: {reasons}")
        return Verdict(
            suitable_now=False,
            reasons=reasons,
            advice=advice,
            weather=weather,
            species=species,
        )
