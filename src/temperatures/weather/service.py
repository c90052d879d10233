"""Weather lookup use case: location classification and gateway orchestration."""

import logging

from temperatures.weather.classifier import classify
from temperatures.weather.gateways import LocationGateway, WeatherGateway
from temperatures.weather.models import GetWeatherInput, GetWeatherOutput, LocationKind

logger = logging.getLogger(__name__)


class InvalidLocationFormatError(ValueError):
    """Raised when a location is neither a CEP nor a coordinate pair."""

    MESSAGE = "Must be in the format 01001001 for CEP or -23.55028,-46.63389 for Coordinates"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class GetWeatherUseCase:
    """Resolves a location string and fetches its current temperature."""

    def __init__(self, location_gateway: LocationGateway, weather_gateway: WeatherGateway):
        """Initialize the use case.

        Args:
            location_gateway: Resolves CEPs to coordinates
            weather_gateway: Fetches temperatures for coordinates
        """
        self.location_gateway = location_gateway
        self.weather_gateway = weather_gateway

    async def execute(self, input_data: GetWeatherInput) -> GetWeatherOutput:
        """
        Get the current temperature for a CEP or a 'lat,lng' pair.

        Args:
            input_data: Raw location provided by the caller

        Returns:
            GetWeatherOutput; ``coordinates`` is None when the CEP is not found

        Raises:
            InvalidLocationFormatError: If the location matches neither format
            GatewayError: If an upstream provider fails; propagated unchanged
        """
        location = input_data.location
        kind = classify(location)

        if kind is LocationKind.INVALID:
            logger.info(f"Rejecting invalid location: {location!r}")
            raise InvalidLocationFormatError()

        if kind is LocationKind.POSTAL_CODE:
            coordinates = await self.location_gateway.resolve(location)
            if not coordinates:
                logger.info(f"No coordinates for CEP {location}")
                return GetWeatherOutput(coordinates=None)
        else:
            coordinates = location

        logger.info(f"Getting temperature for {kind.value} {location} at {coordinates}")
        reading = await self.weather_gateway.get_temperature(coordinates)

        return GetWeatherOutput(coordinates=coordinates, reading=reading)
