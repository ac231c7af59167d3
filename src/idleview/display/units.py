"""Weather unit conversion utilities."""

from __future__ import annotations

from idleview.settings.document import UnitsSettings


class UnitConverter:
    """Converts provider values (°C, km/h) into the units chosen in settings."""

    KMH_TO_MPH = 0.621371

    @staticmethod
    def celsius_to_fahrenheit(celsius: float) -> float:
        return celsius * 9.0 / 5.0 + 32.0

    @classmethod
    def temperature(cls, celsius: float, units: UnitsSettings) -> float:
        """Convert a Celsius reading to the configured temperature unit."""
        if units.is_fahrenheit:
            return cls.celsius_to_fahrenheit(celsius)
        return celsius

    @classmethod
    def wind_speed(cls, kmh: float, units: UnitsSettings) -> float:
        """Convert a km/h reading to the configured wind speed unit."""
        if units.wind_speed_unit == "mph":
            return kmh * cls.KMH_TO_MPH
        if units.wind_speed_unit == "ms":
            return kmh / 3.6
        return kmh

    @staticmethod
    def temperature_symbol(units: UnitsSettings) -> str:
        return "°F" if units.is_fahrenheit else "°C"
