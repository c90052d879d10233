"""Data models for the temperatures service."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationKind(str, Enum):
    """Classification of a raw location string."""
    POSTAL_CODE = "postal_code"
    COORDINATES = "coordinates"
    INVALID = "invalid"


class GetWeatherInput(BaseModel):
    """Input of the weather lookup."""
    location: str = Field(..., description="CEP (01001001) or coordinates (-23.55028,-46.63389)")


class WeatherReading(BaseModel):
    """Current temperature as supplied by the weather provider."""
    model_config = ConfigDict(frozen=True)

    temp_c: float = Field(..., description="Temperature in Celsius")
    temp_f: Optional[float] = Field(None, description="Temperature in Fahrenheit")


class GetWeatherOutput(BaseModel):
    """Result of the weather lookup.

    ``coordinates`` is None when the location could not be resolved.
    """
    model_config = ConfigDict(frozen=True)

    coordinates: Optional[str] = Field(None, description="Resolved 'lat,lng' coordinates")
    reading: Optional[WeatherReading] = Field(None, description="Weather reading at the coordinates")

    @property
    def found(self) -> bool:
        return bool(self.coordinates)


class TemperatureResponse(BaseModel):
    """Temperature response model."""
    coordinates: str = Field(..., description="Resolved 'lat,lng' coordinates")
    temp_c: float = Field(..., description="Temperature in Celsius")
    temp_f: Optional[float] = Field(None, description="Temperature in Fahrenheit")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")


class AwesomeApiCepResponse(BaseModel):
    """Raw response from the AwesomeAPI CEP lookup."""
    cep: str = Field(..., description="Postal code")
    lat: Optional[str] = Field(None, description="Latitude as text")
    lng: Optional[str] = Field(None, description="Longitude as text")
    address: Optional[str] = None
    district: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


class WeatherApiCurrent(BaseModel):
    """Current conditions block of a WeatherAPI response."""
    temp_c: float
    temp_f: Optional[float] = None


class WeatherApiCurrentResponse(BaseModel):
    """Raw response from the WeatherAPI current.json endpoint."""
    current: WeatherApiCurrent = Field(..., description="Current conditions")
