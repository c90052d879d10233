"""Configuration settings for the temperatures service."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Upstream providers
LOCATION_API_BASE_URL: str = os.getenv("LOCATION_API_BASE_URL", "https://cep.awesomeapi.com.br/json")
WEATHER_API_BASE_URL: str = os.getenv("WEATHER_API_BASE_URL", "https://api.weatherapi.com/v1")
WEATHER_API_KEY: str = os.getenv("WEATHER_API_KEY", "")
USER_AGENT: Final[str] = "TemperaturesService/0.1"
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8080"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
