"""Weather and geolocation clients for Open-Meteo and ip-api."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests
from pydantic import ValidationError as PydanticValidationError

from idleview.display.units import UnitConverter
from idleview.errors import NetworkError, ProviderError
from idleview.settings.document import UnitsSettings
from idleview.weather.models import (
    IpApiResponse,
    Location,
    OpenMeteoResponse,
    WeatherReport,
)

logger: Final = logging.getLogger(__name__)

# API endpoints
FORECAST_URL: Final = "https://api.open-meteo.com/v1/forecast"
LOCATION_URL: Final = "http://ip-api.com/json/"

CURRENT_FIELDS: Final = (
    "temperature_2m,relative_humidity_2m,rain,snowfall,cloudcover,wind_speed_10m"
)


def _get_json(
    session: requests.Session, url: str, timeout: float, what: str, **kwargs: Any
) -> Any:
    """GET *url* and return its decoded JSON body.

    Raises:
        NetworkError: On connection problems or an undecodable body
        ProviderError: On a non-200 status
    """
    try:
        resp = session.get(url, timeout=timeout, **kwargs)
    except requests.RequestException as exc:
        logger.warning("%s network error: %s", what, exc)
        raise NetworkError(f"Failed to fetch {what}: {exc}", exc) from exc

    if resp.status_code != 200:
        logger.error("%s error: %s - %s", what, resp.status_code, resp.text)
        raise ProviderError.from_status(resp.status_code, f"{what} error: {resp.text}")

    try:
        return resp.json()
    except ValueError as exc:
        raise NetworkError(f"Failed to parse {what} data: {exc}", exc) from exc


class WeatherAPI:
    """Open-Meteo forecast client.

    Open-Meteo needs no key. Temperatures arrive in °C and wind speed in
    km/h; :meth:`fetch_weather` converts both to the requested units.
    Sunrise and sunset are local times of the forecast location
    (``timezone=auto``).
    """

    def __init__(self, session: requests.Session | None = None, timeout: float = 10) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_forecast(self, latitude: float, longitude: float) -> OpenMeteoResponse:
        """Retrieve the raw current/daily forecast for a position.

        Raises:
            NetworkError: When the request fails or the body is malformed
            ProviderError: For non-200 responses
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_FIELDS,
            "daily": "sunrise,sunset",
            "timezone": "auto",
        }
        data = _get_json(self.session, FORECAST_URL, self.timeout, "weather", params=params)
        try:
            return OpenMeteoResponse.model_validate(data)
        except PydanticValidationError as exc:
            raise NetworkError(f"Failed to parse weather data: {exc}", exc) from exc

    def fetch_weather(
        self, latitude: float, longitude: float, units: UnitsSettings
    ) -> WeatherReport:
        """Retrieve current weather converted to *units*."""
        forecast = self.fetch_forecast(latitude, longitude)
        current = forecast.current
        return WeatherReport(
            temperature=UnitConverter.temperature(current.temperature_2m, units),
            temperature_unit=units.temperature_unit,
            humidity=current.relative_humidity_2m,
            wind_speed=UnitConverter.wind_speed(current.wind_speed_10m, units),
            wind_speed_unit=units.wind_speed_unit,
            wind_speed_label=units.wind_speed_label,
            cloudcover=current.cloudcover,
            rain=current.rain,
            snowfall=current.snowfall,
            sunrise=forecast.sunrise,
            sunset=forecast.sunset,
            timezone=forecast.timezone,
        )


class LocationAPI:
    """IP-based geolocation through ip-api.com."""

    def __init__(self, session: requests.Session | None = None, timeout: float = 10) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_location(self) -> Location:
        """Return the approximate position of this host.

        Raises:
            NetworkError: When the request fails or the body is malformed
            ProviderError: For non-200 responses
        """
        data = _get_json(self.session, LOCATION_URL, self.timeout, "location")
        try:
            return IpApiResponse.model_validate(data).to_location()
        except PydanticValidationError as exc:
            raise NetworkError(f"Failed to parse location data: {exc}", exc) from exc
