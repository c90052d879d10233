"""API endpoints for the temperatures service."""

import logging

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from temperatures.weather.models import ErrorResponse, GetWeatherInput, TemperatureResponse
from temperatures.weather.service import GetWeatherUseCase, InvalidLocationFormatError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["temperature"])


def get_weather_use_case(request: Request) -> GetWeatherUseCase:
    """Dependency building the use case from the gateways owned by the app."""
    return GetWeatherUseCase(
        location_gateway=request.app.state.location_gateway,
        weather_gateway=request.app.state.weather_gateway
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error body of the form {"error": message}."""
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "/temperature/{location}",
    response_model=TemperatureResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Location not found"},
        422: {"model": ErrorResponse, "description": "Invalid location"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    }
)
async def get_temperature(
    location: str = Path(..., description="CEP (01001001) or coordinates (-23.55028,-46.63389)"),
    use_case: GetWeatherUseCase = Depends(get_weather_use_case)
):
    """Get the current temperature by CEP or 'lat,lng' coordinates.

    Args:
        location: Raw location string from the path
        use_case: Weather lookup use case

    Returns:
        TemperatureResponse, or a JSON error body with 404, 422 or 500
    """
    try:
        output = await use_case.execute(GetWeatherInput(location=location))
    except InvalidLocationFormatError as e:
        logger.info(f"Invalid location {location!r}: {e}")
        return error_response(422, "invalid location")
    except Exception as e:
        logger.exception(f"Unexpected error getting temperature for {location!r}: {e}")
        return error_response(500, "internal server error")

    if not output.found:
        return error_response(404, "location not found")

    try:
        body = TemperatureResponse(
            coordinates=output.coordinates,
            temp_c=output.reading.temp_c,
            temp_f=output.reading.temp_f
        )
        return JSONResponse(status_code=200, content=body.model_dump())
    except Exception as e:
        logger.exception(f"Error encoding temperature response: {e}")
        return error_response(500, "internal server error")


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "temperatures"}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information."""
    return {
        "service": "Temperatures Service",
        "version": "0.1.0",
        "accepted_formats": {
            "cep": "01001001",
            "coordinates": "-23.55028,-46.63389"
        },
        "endpoints": ["/temperature/{location}"],
        "data_sources": ["AwesomeAPI CEP", "WeatherAPI"]
    }
