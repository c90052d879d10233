"""HTTP client for the WeatherAPI current conditions endpoint."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from temperatures.config import (
    WEATHER_API_BASE_URL, WEATHER_API_KEY, USER_AGENT, HTTP_TIMEOUT_SECONDS
)
from temperatures.weather.gateways import WeatherGateway, WeatherGatewayError
from temperatures.weather.models import WeatherApiCurrentResponse, WeatherReading

logger = logging.getLogger(__name__)


class WeatherApiGateway(WeatherGateway):
    """Async client for fetching current temperatures from weatherapi.com."""

    def __init__(
        self,
        api_key: str = WEATHER_API_KEY,
        base_url: str = WEATHER_API_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS
    ):
        """Initialize the weather gateway.

        Args:
            api_key: WeatherAPI key
            base_url: Base URL for WeatherAPI
            client: HTTP client to use (creates default if None)
            timeout: Request timeout in seconds for the default client
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout
        )

    async def get_temperature(self, coordinates: str) -> WeatherReading:
        """Fetch the current temperature for given coordinates.

        Args:
            coordinates: 'lat,lng' in decimal degrees

        Returns:
            Current temperature reading

        Raises:
            WeatherGatewayError: If the key is missing, the request fails
                or the response format is invalid
        """
        if not self.api_key:
            raise WeatherGatewayError("WEATHER_API_KEY not set")

        params = {"key": self.api_key, "q": coordinates, "aqi": "no"}
        url = f"{self.base_url}/current.json"

        logger.info(f"Fetching current weather for {coordinates}")

        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.error(f"HTTP error from WeatherAPI: {e.response.status_code} - {message}")
            raise WeatherGatewayError(
                f"Weather service returned HTTP {e.response.status_code}: {message}"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error to WeatherAPI: {e}")
            raise WeatherGatewayError(f"Weather service unavailable: {e}") from e

        try:
            payload = WeatherApiCurrentResponse(**response.json())
        except (ValidationError, ValueError, TypeError) as e:
            logger.error(f"Invalid WeatherAPI response format: {e}")
            raise WeatherGatewayError(f"Invalid weather service response: {e}") from e

        reading = WeatherReading(temp_c=payload.current.temp_c, temp_f=payload.current.temp_f)
        logger.info(f"Current temperature at {coordinates}: {reading.temp_c}C")
        return reading

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()


def _error_message(response: httpx.Response) -> str:
    # WeatherAPI errors look like {"error": {"code": 1006, "message": "..."}}
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return response.text[:300]
