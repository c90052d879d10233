"""Main FastAPI application for the temperatures service."""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from temperatures.api.endpoints import router as temperature_router
from temperatures.config import HOST, PORT, DEBUG
from temperatures.logging_config import configure_logging
from temperatures.weather.client import WeatherApiGateway
from temperatures.weather.geocoding import AwesomeApiLocationGateway

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager owning the gateways' HTTP clients."""
    try:
        app.state.location_gateway = AwesomeApiLocationGateway()
        app.state.weather_gateway = WeatherApiGateway()
        if not app.state.weather_gateway.api_key:
            logger.warning("WEATHER_API_KEY is not set; temperature lookups will fail")

        logger.info("Starting Temperatures Service")
        yield
    except Exception as e:
        logger.error(f"Lifespan error: {e}")
        logger.error(traceback.format_exc())
        raise
    finally:
        logger.info("Shutting down Temperatures Service")
        for name in ("location_gateway", "weather_gateway"):
            gateway = getattr(app.state, name, None)
            if gateway is not None:
                try:
                    await gateway.aclose()
                except Exception as e:
                    logger.error(f"Error closing {name}: {e}")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather API",
        description="API for retrieving the current temperature by CEP or coordinates",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(temperature_router)

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "temperatures.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
