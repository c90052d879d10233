"""Postal code geocoding through the AwesomeAPI CEP service."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from temperatures.config import LOCATION_API_BASE_URL, USER_AGENT, HTTP_TIMEOUT_SECONDS
from temperatures.weather.gateways import LocationGateway, LocationGatewayError
from temperatures.weather.models import AwesomeApiCepResponse

logger = logging.getLogger(__name__)

# AwesomeAPI answers 404 for unknown CEPs and 400 for impossible ones
NOT_FOUND_STATUSES = {400, 404}


class AwesomeApiLocationGateway(LocationGateway):
    """Resolves CEPs to coordinates using cep.awesomeapi.com.br."""

    def __init__(
        self,
        base_url: str = LOCATION_API_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS
    ):
        """Initialize the location gateway.

        Args:
            base_url: Base URL of the CEP lookup API
            client: HTTP client to use (creates default if None)
            timeout: Request timeout in seconds for the default client
        """
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout
        )
        logger.info(f"AwesomeApiLocationGateway initialized with {self.base_url}")

    async def resolve(self, postal_code: str) -> Optional[str]:
        """Convert a CEP to coordinates.

        Args:
            postal_code: 8 digit CEP

        Returns:
            Coordinates as 'lat,lng', or None if the CEP is not found

        Raises:
            LocationGatewayError: If the request or the response is broken
        """
        url = f"{self.base_url}/{postal_code}"
        logger.info(f"Resolving CEP: {postal_code}")

        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            logger.error(f"Request error to CEP API for '{postal_code}': {e}")
            raise LocationGatewayError(f"CEP service unavailable: {e}") from e

        if response.status_code in NOT_FOUND_STATUSES:
            logger.info(f"CEP '{postal_code}' not found (HTTP {response.status_code})")
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from CEP API: {response.status_code} - {response.text}")
            raise LocationGatewayError(f"CEP service returned HTTP {response.status_code}") from e

        try:
            payload = AwesomeApiCepResponse(**response.json())
        except (ValidationError, ValueError, TypeError) as e:
            logger.error(f"Invalid CEP API response format: {e}")
            raise LocationGatewayError(f"Invalid CEP service response: {e}") from e

        if not payload.lat or not payload.lng:
            logger.info(f"CEP '{postal_code}' has no coordinates")
            return None

        coordinates = f"{payload.lat},{payload.lng}"
        logger.info(f"Successfully resolved CEP '{postal_code}' to {coordinates}")
        return coordinates

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
