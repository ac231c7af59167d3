"""Display-side formatting helpers."""

from idleview.display.formatting import (
    FormattedTime,
    PrecipitationDisplay,
    format_age,
    format_current_time,
    format_time_remaining,
    is_cache_valid,
    precipitation_display,
)
from idleview.display.units import UnitConverter

__all__ = [
    "FormattedTime",
    "PrecipitationDisplay",
    "UnitConverter",
    "format_age",
    "format_current_time",
    "format_time_remaining",
    "is_cache_valid",
    "precipitation_display",
]
