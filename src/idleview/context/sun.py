"""Memo of the most recently parsed sunrise/sunset pair."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Final

from idleview.errors import ParseError

logger: Final = logging.getLogger(__name__)

SUN_TIME_FORMAT: Final = "%Y-%m-%dT%H:%M"


def parse_sun_time(raw: str) -> datetime:
    """Parse a local ``YYYY-MM-DDTHH:MM`` string into a naive datetime.

    Raises:
        ParseError: If the string does not match the format exactly
    """
    try:
        return datetime.strptime(raw, SUN_TIME_FORMAT)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Invalid sun time {raw!r}: {exc}") from exc


@dataclass(frozen=True)
class SunTimesEntry:
    sunrise_raw: str
    sunset_raw: str
    sunrise: datetime
    sunset: datetime


class SunTimeCache:
    """Single-entry cache keyed by the exact raw sunrise/sunset strings.

    A different pair always replaces the entry; a pair that fails to
    parse leaves it untouched.
    """

    def __init__(self) -> None:
        self._entry: SunTimesEntry | None = None
        self._lock = threading.Lock()

    @property
    def entry(self) -> SunTimesEntry | None:
        return self._entry

    def resolve(self, sunrise_raw: str, sunset_raw: str) -> tuple[datetime, datetime] | None:
        """Return the parsed (sunrise, sunset) pair, or None if either fails to parse."""
        with self._lock:
            entry = self._entry
        if entry and entry.sunrise_raw == sunrise_raw and entry.sunset_raw == sunset_raw:
            return entry.sunrise, entry.sunset

        try:
            sunrise = parse_sun_time(sunrise_raw)
            sunset = parse_sun_time(sunset_raw)
        except ParseError as exc:
            logger.debug("Sun times not usable: %s", exc)
            return None

        with self._lock:
            self._entry = SunTimesEntry(sunrise_raw, sunset_raw, sunrise, sunset)
        return sunrise, sunset
