"""Weather package - Open-Meteo and ip-api clients and their models."""

from .api import LocationAPI, WeatherAPI
from .models import Location, OpenMeteoResponse, WeatherReport

__all__ = [
    "Location",
    "LocationAPI",
    "OpenMeteoResponse",
    "WeatherAPI",
    "WeatherReport",
]
