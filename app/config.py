"""
Application configuration using Pydantic settings.
"""
from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field


DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "plants.in.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Weather Provider Configuration
    openweather_api_key: str = Field(
        default="",
        description="OpenWeather API key (Open-Meteo is used when empty)"
    )
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org",
        description="Base URL for the OpenWeather API"
    )
    open_meteo_base_url: str = Field(
        default="https://api.open-meteo.com",
        description="Base URL for the keyless Open-Meteo API"
    )

    # Identification Provider Configuration
    plantnet_api_key: str = Field(
        default="",
        description="Pl@ntNet API key for plant identification"
    )
    plantnet_base_url: str = Field(
        default="https://my-api.plantnet.org",
        description="Base URL for the Pl@ntNet API"
    )
    plantnet_min_score: float = Field(
        default=0.2,
        description="Provider score below which an identification is reported as unknown"
    )

    # Retry Configuration
    max_retry_attempts: int = Field(
        default=3,
        description="Maximum number of retry attempts for API calls"
    )
    retry_backoff_multiplier: int = Field(
        default=1,
        description="Multiplier for exponential backoff"
    )
    retry_min_wait: int = Field(
        default=1,
        description="Minimum wait time in seconds between retries"
    )
    retry_max_wait: int = Field(
        default=10,
        description="Maximum wait time in seconds between retries"
    )
    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for outbound HTTP requests"
    )

    # Requirement Catalog
    plant_catalog_path: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        description="JSON file holding the plant requirement catalog"
    )

    # Region Classification
    region_latitude_threshold: float = Field(
        default=16.0,
        description="Latitudes below this value map to the southern sowing calendar"
    )

    # Alternative Recommendation
    alternative_candidates: list[str] = Field(
        default=[
            "pearl millet",
            "finger millet",
            "sorghum",
            "paddy",
            "tomato",
            "chili",
            "okra",
            "spinach",
            "coriander",
        ],
        description="Ordered crops probed when the identified species is unsuitable"
    )
    max_alternatives: int = Field(
        default=3,
        description="Maximum number of alternative crops returned"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Rate Limiting
    rate_limit_requests: int = Field(
        default=100,
        description="Maximum requests per minute per client"
    )

    # Application Settings
    app_name: str = Field(
        default="Sowing Suitability API",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
