"""Gateway interfaces for the upstream data providers."""

from abc import ABC, abstractmethod
from typing import Optional

from temperatures.weather.models import WeatherReading


class GatewayError(Exception):
    """Raised when an upstream provider cannot be reached or answers badly."""
    pass


class LocationGatewayError(GatewayError):
    """Raised when the postal code lookup fails."""
    pass


class WeatherGatewayError(GatewayError):
    """Raised when the weather lookup fails."""
    pass


class LocationGateway(ABC):
    @abstractmethod
    async def resolve(self, postal_code: str) -> Optional[str]:
        """Convert a postal code to 'lat,lng' coordinates.

        Returns None if the postal code cannot be resolved.
        """
        ...


class WeatherGateway(ABC):
    @abstractmethod
    async def get_temperature(self, coordinates: str) -> WeatherReading:
        """Fetch the current temperature at 'lat,lng' coordinates."""
        ...
