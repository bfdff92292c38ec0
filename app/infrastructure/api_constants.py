"""
API endpoint constants and configuration.

This module contains all external API endpoint paths and related constants.
Centralizing these values makes it easy to swap out endpoints or update API versions.
"""

# OpenWeather API Endpoints
class OpenWeatherEndpoints:
    """OpenWeather API endpoint paths."""

    CURRENT_WEATHER = "/data/2.5/weather"
    UNITS = "metric"


# Open-Meteo API Endpoints
class OpenMeteoEndpoints:
    """Open-Meteo API endpoint paths."""

    FORECAST = "/v1/forecast"
    HOURLY_FIELDS = "relativehumidity_2m,temperature_2m"
    WIND_SPEED_UNIT = "ms"


# Pl@ntNet API Endpoints
class PlantNetEndpoints:
    """Pl@ntNet API endpoint paths."""

    IDENTIFY_BASE = "/v2/identify"
    IDENTIFY_ALL = f"{IDENTIFY_BASE}/all"


# API Configuration Constants
class APIConstants:
    """General API configuration constants."""

    # HTTP Headers
    CONTENT_TYPE_JSON = "application/json"
    CONTENT_TYPE_JPEG = "image/jpeg"

    # Upload defaults
    DEFAULT_IMAGE_FILENAME = "image.jpg"
    DEFAULT_ORGAN = "auto"
