"""Typed models for Open-Meteo and ip-api responses.

Only the fields used by the display are modelled.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from idleview.context.models import WeatherObservation


class OpenMeteoCurrent(BaseModel):
    """``current`` block; temperature in °C and wind in km/h."""

    temperature_2m: float
    relative_humidity_2m: float
    rain: float
    snowfall: float
    cloudcover: float
    wind_speed_10m: float

    model_config = ConfigDict(extra="ignore")


class OpenMeteoDaily(BaseModel):
    sunrise: list[str] = Field(default_factory=list)
    sunset: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class OpenMeteoResponse(BaseModel):
    current: OpenMeteoCurrent
    daily: OpenMeteoDaily
    timezone: str

    model_config = ConfigDict(extra="ignore")

    @property
    def sunrise(self) -> str:
        """Today's sunrise, or "" if the provider sent none."""
        return self.daily.sunrise[0] if self.daily.sunrise else ""

    @property
    def sunset(self) -> str:
        """Today's sunset, or "" if the provider sent none."""
        return self.daily.sunset[0] if self.daily.sunset else ""


class WeatherReport(BaseModel):
    """Current weather converted to the user's units, as sent to the display."""

    temperature: float
    temperature_unit: str
    humidity: float
    wind_speed: float
    wind_speed_unit: str
    wind_speed_label: str
    cloudcover: float
    rain: float
    snowfall: float
    sunrise: str
    sunset: str
    timezone: str

    def to_observation(self) -> WeatherObservation:
        """Return the fields the context engine needs."""
        return WeatherObservation(
            temperature=self.temperature,
            humidity=self.humidity,
            wind_speed=self.wind_speed,
            cloudcover=self.cloudcover,
            rain=self.rain,
            snowfall=self.snowfall,
            sunrise=self.sunrise or None,
            sunset=self.sunset or None,
            timezone=self.timezone,
        )


class Location(BaseModel):
    latitude: float
    longitude: float
    city: str | None = None
    country: str | None = None


class IpApiResponse(BaseModel):
    lat: float
    lon: float
    city: str | None = None
    country: str | None = None

    model_config = ConfigDict(extra="ignore")

    def to_location(self) -> Location:
        return Location(latitude=self.lat, longitude=self.lon, city=self.city, country=self.country)
