"""
Infrastructure layer: Current-weather providers.

OpenWeather is used when an API key is configured; otherwise the keyless
Open-Meteo forecast API supplies the reading.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from app.config import settings
from app.domain.models import WeatherSnapshot
from app.infrastructure.api_constants import OpenMeteoEndpoints, OpenWeatherEndpoints
from app.infrastructure.external_api_client import ExternalAPIClient, ExternalAPIError

logger = logging.getLogger(__name__)


def _first(items: Any) -> Dict[str, Any]:
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


def _round(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(round(value))
    return None


def _current_hour_index(times: Any, current_time: Any) -> Optional[int]:
    """
    Position of the current reading in an hourly forecast series.

    The hourly series spans the whole forecast horizon, so only the slot
    whose hour matches ``current_weather.time`` describes the present.
    Timestamps are compared to the hour ("2025-07-01T09:15" matches the
    "2025-07-01T09:00" slot).
    """
    if not isinstance(times, list) or not isinstance(current_time, str):
        return None
    hour = current_time[:13]
    for index, stamp in enumerate(times):
        if isinstance(stamp, str) and stamp[:13] == hour:
            return index
    return None


class OpenWeatherClient(ExternalAPIClient):
    """Client for the OpenWeather current weather API."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        super().__init__(base_url or settings.openweather_base_url)
        self.api_key = api_key if api_key is not None else settings.openweather_api_key

    async def get_current_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """
        Fetch the current weather at a location.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            WeatherSnapshot in metric units

        Raises:
            ExternalAPIError: If the key is missing or the request fails
        """
        if not self.api_key:
            raise ExternalAPIError("OPENWEATHER_API_KEY not configured", status_code=500)

        data = await self._make_request(
            "GET",
            OpenWeatherEndpoints.CURRENT_WEATHER,
            params={
                "lat": latitude,
                "lon": longitude,
                "appid": self.api_key,
                "units": OpenWeatherEndpoints.UNITS,
            },
        )
        return self.parse_weather(data)

    @staticmethod
    def parse_weather(data: Dict[str, Any]) -> WeatherSnapshot:
        main = data.get("main") or {}
        wind = data.get("wind") or {}
        condition = _first(data.get("weather"))
        return WeatherSnapshot(
            temp_c=main.get("temp"),
            humidity=main.get("humidity"),
            windspeed_ms=wind.get("speed"),
            condition=condition.get("main"),
            description=condition.get("description"),
            city=data.get("name"),
            country=(data.get("sys") or {}).get("country"),
        )


class OpenMeteoClient(ExternalAPIClient):
    """Client for the keyless Open-Meteo forecast API."""

    def __init__(self, base_url: Optional[str] = None):
        super().__init__(base_url or settings.open_meteo_base_url)

    async def get_current_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """
        Fetch the current weather at a location.

        Humidity is not part of Open-Meteo's current block, so the latest
        hourly relative humidity value is used instead.
        """
        data = await self._make_request(
            "GET",
            OpenMeteoEndpoints.FORECAST,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current_weather": "true",
                "hourly": OpenMeteoEndpoints.HOURLY_FIELDS,
                "windspeed_unit": OpenMeteoEndpoints.WIND_SPEED_UNIT,
                "timezone": "auto",
            },
        )
        return self.parse_weather(data)

    @staticmethod
    def parse_weather(data: Dict[str, Any]) -> WeatherSnapshot:
        current = data.get("current_weather") or {}
        hourly = data.get("hourly") or {}

        humidity = None
        series: List[Any] = hourly.get("relativehumidity_2m") or []
        index = _current_hour_index(hourly.get("time"), current.get("time"))
        if index is not None and isinstance(series, list) and index < len(series):
            humidity = _round(series[index])

        return WeatherSnapshot(
            temp_c=_round(current.get("temperature")),
            humidity=humidity,
            windspeed_ms=current.get("windspeed"),
        )


WeatherClient = Union[OpenWeatherClient, OpenMeteoClient]


# Singleton instance
_weather_client: Optional[WeatherClient] = None


def get_weather_client() -> WeatherClient:
    """
    Get or create the singleton weather client instance.

    Returns:
        OpenWeatherClient when a key is configured, else OpenMeteoClient
    """
    global _weather_client
    if _weather_client is None:
        if settings.openweather_api_key:
            _weather_client = OpenWeatherClient()
        else:
            logger.info("No OpenWeather API key configured, using Open-Meteo for weather")
            _weather_client = OpenMeteoClient()
    return _weather_client
