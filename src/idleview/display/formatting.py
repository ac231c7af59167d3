"""Text formatting for the clock, precipitation and photo cache panels."""

from __future__ import annotations

from datetime import datetime
from typing import Final

from pydantic import BaseModel

from idleview.settings.document import UnitsSettings

TIME_FORMAT_24H: Final = "%H:%M"
TIME_FORMAT_12H: Final = "%-I:%M %p"

# strftime patterns per date_format setting; unknown values use mdy
DATE_FORMATS: Final = {
    "mdy": "%b %d, %Y",  # Nov 28, 2025
    "dmy": "%d %b %Y",  # 28 Nov 2025
    "ymd": "%Y %b %d",  # 2025 Nov 28
}


class FormattedTime(BaseModel):
    time: str
    date: str
    day_of_week: str
    timestamp: int  # epoch milliseconds


class PrecipitationDisplay(BaseModel):
    icon: str
    label: str
    value: str


def epoch_millis(dt: datetime) -> int:
    """Return epoch milliseconds for *dt* (naive values are local time)."""
    return int(dt.timestamp() * 1000)


def format_current_time(now: datetime, units: UnitsSettings) -> FormattedTime:
    """Format the clock and date for *now* according to the unit settings."""
    time_fmt = TIME_FORMAT_12H if units.is_12h else TIME_FORMAT_24H
    date_fmt = DATE_FORMATS.get(units.date_format, DATE_FORMATS["mdy"])
    return FormattedTime(
        time=now.strftime(time_fmt),
        date=now.strftime(date_fmt),
        day_of_week=now.strftime("%A").upper(),
        timestamp=epoch_millis(now),
    )


def precipitation_display(snowfall: float, rain: float) -> PrecipitationDisplay:
    """Pick the icon, label and value shown in the precipitation panel.

    Snow takes priority over rain; neither shows as "Clear".
    """
    if snowfall > 0.0:
        return PrecipitationDisplay(icon="snowflake.svg", label="Snow", value=f"{snowfall:.1f} cm")
    if rain > 0.0:
        return PrecipitationDisplay(icon="droplets.svg", label="Rain", value=f"{rain:.1f} mm")
    return PrecipitationDisplay(icon="umbrella.svg", label="Precip", value="Clear")


def is_cache_valid(cache_timestamp: int, refresh_interval_minutes: int, now_ms: int) -> bool:
    """Return True while a photo cached at *cache_timestamp* (ms) is still fresh.

    A timestamp in the future counts as age zero.
    """
    age = max(now_ms - cache_timestamp, 0)
    return age < refresh_interval_minutes * 60 * 1000


def format_time_remaining(milliseconds: int) -> str:
    """Format a countdown, e.g. "1h 05m", "4m 09s" or "12s"."""
    if milliseconds <= 0:
        return "0s"

    total_seconds = milliseconds // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes:02d}m"
    if minutes > 0:
        return f"{minutes}m {seconds:02d}s"
    return f"{seconds}s"


def format_age(cache_timestamp: int | None, now_ms: int) -> str:
    """Format how long ago *cache_timestamp* (ms) was, e.g. "5m ago"."""
    if cache_timestamp is None:
        return "unknown"

    seconds = max(now_ms - cache_timestamp, 0) // 1000
    if seconds < 60:
        return f"{seconds}s ago"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"
