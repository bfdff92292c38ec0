"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.middleware.error_handler import ErrorHandlerMiddleware
from app.middleware.rate_limit import limiter
from app.api.v1.routers import identification, suitability, weather

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Loads the requirement catalog on startup and closes the outbound
    HTTP clients on shutdown.
    """
    from app.infrastructure.identification_client import get_identification_client
    from app.infrastructure.weather_client import get_weather_client
    from app.services.domain.requirement_catalog import get_requirement_catalog

    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    catalog = get_requirement_catalog()
    logger.info(f"Requirement catalog: {len(catalog)} entries from {settings.plant_catalog_path}")
    logger.info(f"Region config: latitude_threshold={settings.region_latitude_threshold}")
    logger.info(f"Alternatives: {len(settings.alternative_candidates)} candidates, "
                f"max={settings.max_alternatives}")
    logger.info(f"Rate limit: {settings.rate_limit_requests} requests/minute")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await get_weather_client().close()
    await get_identification_client().close()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Sowing Suitability API for growers

    This API tells a grower whether now is a good time to sow a plant
    identified from a photo, why not if it isn't, what to change, and which
    other crops are viable instead.

    ## Features

    - **Suitability Verdicts**: Temperature, humidity and regional sowing
      calendar checks with reasons and actionable advice
    - **Alternative Crops**: Concurrent evaluation of common regional crops
      when the identified plant is unsuitable
    - **Confidence Gate**: Unreliable identifications are rejected before
      any agronomic evaluation
    - **Provider Proxies**: Current weather (OpenWeather or Open-Meteo) and
      plant identification (Pl@ntNet) with retries and exponential backoff
    - **Rate Limiting**: Protects the API from abuse

    ## Decision Rules

    1. No species, or confidence below 40%, stops the request
    2. Temperature outside the species' band fails the verdict
    3. Humidity outside the band fails the verdict when both bounds are known
    4. A month outside the region's sowing calendar fails the verdict;
       missing calendar data never does
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add global error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Include routers
app.include_router(suitability.router, prefix="/api/v1")
app.include_router(weather.router, prefix="/api/v1")
app.include_router(identification.router, prefix="/api/v1")


@app.get("/", tags=["health"])
async def root():
    """
    Root endpoint for health check.

    Returns:
        Status message
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "endpoints": [
            "/health",
            "GET /api/v1/weather?lat=13.0827&lon=80.2707",
            "POST /api/v1/identify",
            "POST /api/v1/suitability",
            "POST /api/v1/assess",
        ],
    }


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
    }
