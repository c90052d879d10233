from __future__ import annotations

import pytest

from temperatures.weather.gateways import LocationGatewayError, WeatherGatewayError
from temperatures.weather.models import GetWeatherInput, WeatherReading
from temperatures.weather.service import GetWeatherUseCase, InvalidLocationFormatError

from conftest import FakeLocationGateway, FakeWeatherGateway


async def test_invalid_location_calls_no_gateway(location_gateway, weather_gateway) -> None:
    use_case = GetWeatherUseCase(location_gateway, weather_gateway)

    with pytest.raises(InvalidLocationFormatError) as exc_info:
        await use_case.execute(GetWeatherInput(location="sao paulo"))

    assert str(exc_info.value) == (
        "Must be in the format 01001001 for CEP or -23.55028,-46.63389 for Coordinates"
    )
    assert location_gateway.calls == []
    assert weather_gateway.calls == []


async def test_coordinates_skip_location_gateway(location_gateway, weather_gateway) -> None:
    use_case = GetWeatherUseCase(location_gateway, weather_gateway)

    output = await use_case.execute(GetWeatherInput(location="-23.55028,-46.63389"))

    assert location_gateway.calls == []
    assert weather_gateway.calls == ["-23.55028,-46.63389"]
    assert output.coordinates == "-23.55028,-46.63389"
    assert output.reading == WeatherReading(temp_c=25.0, temp_f=77.0)
    assert output.found


async def test_postal_code_is_resolved_then_weather_fetched(weather_gateway) -> None:
    location_gateway = FakeLocationGateway(coordinates="-23.55,-46.63")
    use_case = GetWeatherUseCase(location_gateway, weather_gateway)

    output = await use_case.execute(GetWeatherInput(location="01001001"))

    assert location_gateway.calls == ["01001001"]
    assert weather_gateway.calls == ["-23.55,-46.63"]
    assert output.coordinates == "-23.55,-46.63"
    assert output.reading.temp_c == 25.0


@pytest.mark.parametrize("coordinates", [None, ""])
async def test_unresolved_postal_code_is_not_found(weather_gateway, coordinates) -> None:
    use_case = GetWeatherUseCase(FakeLocationGateway(coordinates=coordinates), weather_gateway)

    output = await use_case.execute(GetWeatherInput(location="99999999"))

    assert output.coordinates is None
    assert output.reading is None
    assert not output.found
    assert weather_gateway.calls == []


async def test_location_gateway_error_propagates_unchanged(weather_gateway) -> None:
    error = LocationGatewayError("CEP service unavailable")
    use_case = GetWeatherUseCase(FakeLocationGateway(error=error), weather_gateway)

    with pytest.raises(LocationGatewayError) as exc_info:
        await use_case.execute(GetWeatherInput(location="01001001"))

    assert exc_info.value is error
    assert weather_gateway.calls == []


async def test_weather_gateway_error_propagates_unchanged(location_gateway) -> None:
    error = WeatherGatewayError("Weather service returned HTTP 400")
    use_case = GetWeatherUseCase(location_gateway, FakeWeatherGateway(error=error))

    with pytest.raises(WeatherGatewayError) as exc_info:
        await use_case.execute(GetWeatherInput(location="10,20"))

    assert exc_info.value is error


async def test_repeated_execution_is_idempotent(location_gateway, weather_gateway) -> None:
    use_case = GetWeatherUseCase(location_gateway, weather_gateway)

    first = await use_case.execute(GetWeatherInput(location="01001001"))
    second = await use_case.execute(GetWeatherInput(location="01001001"))

    assert first == second
