"""User-configurable display settings persisted to settings.json."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator


class UnitsSettings(BaseModel):
    """Measurement and clock units.

    Values must be JSON strings. Unknown labels are kept as-is and
    fall back to the default interpretation where they are used.
    """

    temperature_unit: StrictStr = Field("celsius", description="celsius or fahrenheit")
    time_format: StrictStr = Field("24h", description="24h or 12h")
    date_format: StrictStr = Field("dmy", description="mdy, dmy or ymd")
    wind_speed_unit: StrictStr = Field("kmh", description="kmh, mph or ms")

    @property
    def is_fahrenheit(self) -> bool:
        """Whether temperatures are shown in Fahrenheit."""
        return self.temperature_unit == "fahrenheit"

    @property
    def is_12h(self) -> bool:
        """Whether the clock uses a 12-hour format."""
        return self.time_format == "12h"

    @property
    def wind_speed_label(self) -> str:
        """Display label for the configured wind speed unit."""
        if self.wind_speed_unit == "mph":
            return "mph"
        if self.wind_speed_unit == "ms":
            return "m/s"
        return "km/h"


class DisplaySettings(BaseModel):
    """Which panels are visible and which theme is applied."""

    show_humidity_wind: StrictBool = True
    show_precipitation_cloudiness: StrictBool = True
    show_sunrise_sunset: StrictBool = True
    show_cpu_temp: StrictBool = False
    theme: StrictStr = Field("default", description="UI theme name (default, nest)")


class PhotosSettings(BaseModel):
    """Background photo behaviour."""

    LEGACY_QUALITY: ClassVar[dict[str, int]] = {
        "low": 65,
        "medium": 80,
        "high": 100,
        "maximum": 100,
    }
    DEFAULT_QUALITY: ClassVar[int] = 80

    refresh_interval: StrictInt = Field(30, gt=0, description="Photo refresh interval (minutes)")
    photo_quality: StrictStr = Field(
        "80", description="Legacy label (low|medium|high|maximum) or a number 0-100"
    )

    @field_validator("photo_quality", mode="before")
    @classmethod
    def accept_numeric_quality(cls, v: Any) -> Any:
        """Store numeric JSON values as their decimal string."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def quality_percent(self) -> int:
        """Image quality (0-100) requested from the photo provider."""
        label = self.photo_quality.strip().lower()
        if label in self.LEGACY_QUALITY:
            return self.LEGACY_QUALITY[label]
        try:
            value = int(label)
        except ValueError:
            return self.DEFAULT_QUALITY
        return value if 0 <= value <= 100 else self.DEFAULT_QUALITY


class SettingsDocument(BaseModel):
    """The single settings document of an installation.

    Every field has a default, so older or partial files load cleanly.
    """

    units: UnitsSettings = Field(default_factory=UnitsSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    photos: PhotosSettings = Field(default_factory=PhotosSettings)

    @classmethod
    def default(cls) -> SettingsDocument:
        """Return a document holding the built-in defaults."""
        return cls()

    def to_json_tree(self) -> dict[str, Any]:
        """Return the document as plain JSON-compatible data."""
        return self.model_dump(mode="json")
