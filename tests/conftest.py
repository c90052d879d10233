from __future__ import annotations

from typing import List, Optional

import pytest

from temperatures.weather.gateways import LocationGateway, WeatherGateway
from temperatures.weather.models import WeatherReading


class FakeLocationGateway(LocationGateway):
    def __init__(self, coordinates: Optional[str] = "-23.55,-46.63", error: Exception | None = None) -> None:
        self.coordinates = coordinates
        self.error = error
        self.calls: List[str] = []

    async def resolve(self, postal_code: str) -> Optional[str]:
        self.calls.append(postal_code)
        if self.error is not None:
            raise self.error
        return self.coordinates


class FakeWeatherGateway(WeatherGateway):
    def __init__(self, reading: WeatherReading | None = None, error: Exception | None = None) -> None:
        self.reading = reading or WeatherReading(temp_c=25.0, temp_f=77.0)
        self.error = error
        self.calls: List[str] = []

    async def get_temperature(self, coordinates: str) -> WeatherReading:
        self.calls.append(coordinates)
        if self.error is not None:
            raise self.error
        return self.reading


@pytest.fixture
def location_gateway() -> FakeLocationGateway:
    return FakeLocationGateway()


@pytest.fixture
def weather_gateway() -> FakeWeatherGateway:
    return FakeWeatherGateway()
