"""Operations exposed to the HTTP server and the GUI command layer."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Final

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from typing_extensions import TypedDict

from idleview.config import AppConfig
from idleview.context.engine import ContextEngine
from idleview.context.models import (
    HolidayInfo,
    PhotoQuery,
    SeasonInfo,
    TimeOfDay,
    WeatherObservation,
)
from idleview.display.formatting import (
    FormattedTime,
    PrecipitationDisplay,
    epoch_millis,
    format_age,
    format_current_time,
    format_time_remaining,
    is_cache_valid,
    precipitation_display,
)
from idleview.errors import ValidationError
from idleview.photos.unsplash import CurrentPhoto, UnsplashAPI, UnsplashPhoto, is_usable_key
from idleview.settings.document import SettingsDocument
from idleview.settings.store import SettingsStore
from idleview.system.status import CpuTemp, read_cpu_temp
from idleview.weather.api import LocationAPI, WeatherAPI
from idleview.weather.models import Location, WeatherReport

logger: Final = logging.getLogger(__name__)

SERVICE_NAME: Final = "idleview-api"

SettingsListener = Callable[[SettingsDocument], None]


class HealthStatus(TypedDict):
    """Body of the health check endpoint."""

    status: str
    service: str


class DebugInfo(BaseModel):
    photo_age: str
    query: str
    time_source: str
    time_of_day: str
    api_key_status: str
    api_key_source: str
    temperature: str
    rain: str
    snowfall: str
    cloudcover: str
    season: str


class IdleviewAPI:
    """Facade over the settings store, context engine and provider clients.

    Each method delegates to one component. Errors are raised as
    :class:`~idleview.errors.IdleviewError` subclasses and translated by
    the transport (HTTP 500 or a GUI error string).

    Listeners registered with :meth:`on_settings_changed` are called after
    every successful settings write, mirroring the "settings-updated"
    event the GUI listens for.
    """

    def __init__(
        self,
        store: SettingsStore,
        engine: ContextEngine | None = None,
        weather_api: WeatherAPI | None = None,
        location_api: LocationAPI | None = None,
        unsplash_api: UnsplashAPI | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.store = store
        self.engine = engine or ContextEngine()
        self.weather_api = weather_api or WeatherAPI(timeout=self.config.request_timeout)
        self.location_api = location_api or LocationAPI(timeout=self.config.request_timeout)
        self.unsplash_api = unsplash_api or UnsplashAPI(
            self.config.unsplash_access_key, timeout=self.config.request_timeout
        )
        self._listeners: list[SettingsListener] = []
        self._current_photo: CurrentPhoto | None = None
        self._photo_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: AppConfig) -> IdleviewAPI:
        """Build the facade and load the settings file named by *config*.

        Raises:
            StorageError: If an existing settings file cannot be read
        """
        store = SettingsStore(config.resolve_settings_path())
        store.initialize()
        return cls(store, config=config)

    # ── settings ────────────────────────────────────────────────────────────
    def on_settings_changed(self, listener: SettingsListener) -> None:
        self._listeners.append(listener)

    def _notify(self, document: SettingsDocument) -> None:
        for listener in self._listeners:
            try:
                listener(document)
            except Exception:
                logger.exception("Settings listener failed")

    def get_settings(self) -> SettingsDocument:
        return self.store.get()

    def replace_settings(self, document: SettingsDocument | dict[str, Any]) -> SettingsDocument:
        """Replace all settings.

        Raises:
            ValidationError: If *document* is not a valid settings document
            PersistenceError: If the file could not be written
        """
        if not isinstance(document, SettingsDocument):
            try:
                document = SettingsDocument.model_validate(document)
            except PydanticValidationError as exc:
                raise ValidationError.from_pydantic(exc) from exc
        stored = self.store.replace(document)
        logger.info("Settings updated successfully")
        self._notify(stored)
        return stored

    def patch_settings(self, patch: Any) -> SettingsDocument:
        """Merge a partial document into the settings."""
        stored = self.store.merge_patch(patch)
        logger.info("Settings partially updated successfully")
        self._notify(stored)
        return stored

    def reset_settings(self) -> SettingsDocument:
        stored = self.store.reset()
        logger.info("Settings reset to defaults successfully")
        self._notify(stored)
        return stored

    def health(self) -> HealthStatus:
        return HealthStatus(status="healthy", service=SERVICE_NAME)

    # ── context ─────────────────────────────────────────────────────────────
    def season(self) -> SeasonInfo:
        return self.engine.season()

    def holiday(self) -> HolidayInfo:
        return self.engine.holiday()

    def time_of_day(self, sunrise: str | None = None, sunset: str | None = None) -> TimeOfDay:
        return self.engine.time_of_day(sunrise, sunset)

    def photo_query(
        self,
        weather: WeatherObservation,
        sunrise: str | None = None,
        sunset: str | None = None,
        festive_enabled: bool = True,
    ) -> PhotoQuery:
        return self.engine.photo_query(weather, sunrise, sunset, festive_enabled)

    # ── display formatting ──────────────────────────────────────────────────
    def _now_ms(self) -> int:
        return epoch_millis(self.engine.now())

    def current_time(self) -> FormattedTime:
        return format_current_time(self.engine.now(), self.store.get().units)

    def precipitation_display(self, weather: WeatherObservation) -> PrecipitationDisplay:
        return precipitation_display(weather.snowfall, weather.rain)

    def is_cache_valid(self, cache_timestamp: int) -> bool:
        interval = self.store.get().photos.refresh_interval
        return is_cache_valid(cache_timestamp, interval, self._now_ms())

    def format_time_remaining(self, milliseconds: int) -> str:
        return format_time_remaining(milliseconds)

    def cpu_temp(self) -> CpuTemp:
        return read_cpu_temp(self.store.get().units)

    def debug_info(
        self,
        cache_timestamp: int | None = None,
        query: str | None = None,
        sunrise: str | None = None,
        sunset: str | None = None,
        temperature: float | None = None,
        rain: float | None = None,
        snowfall: float | None = None,
        cloudcover: float | None = None,
    ) -> DebugInfo:
        """Collect the values shown in the on-screen debug overlay."""
        tod = self.time_of_day(sunrise, sunset)
        units = self.store.get().units
        key_ok = is_usable_key(self.config.unsplash_access_key)
        symbol = "°F" if units.is_fahrenheit else "°C"

        return DebugInfo(
            photo_age=format_age(cache_timestamp, self._now_ms()),
            query=query or "n/a",
            time_source=tod.source,
            time_of_day=tod.time_of_day,
            api_key_status="Available" if key_ok else "Missing or invalid",
            api_key_source=self.config.unsplash_key_source if key_ok else "None",
            temperature=f"{temperature:.1f}{symbol}" if temperature is not None else "n/a",
            rain=f"{rain:.1f}mm" if rain is not None else "n/a",
            snowfall=f"{snowfall:.1f}cm" if snowfall is not None else "n/a",
            cloudcover=f"{int(cloudcover)}%" if cloudcover is not None else "n/a",
            season=self.season().season,
        )

    # ── providers ───────────────────────────────────────────────────────────
    def get_location(self) -> Location:
        return self.location_api.fetch_location()

    def get_weather(self, latitude: float, longitude: float) -> WeatherReport:
        return self.weather_api.fetch_weather(latitude, longitude, self.store.get().units)

    def get_unsplash_photo(self, width: int, height: int, query: str) -> UnsplashPhoto:
        quality = self.store.get().photos.quality_percent
        return self.unsplash_api.random_photo(width, height, query, quality)

    def trigger_unsplash_download(self, download_url: str) -> None:
        self.unsplash_api.trigger_download(download_url)

    def get_current_photo(self) -> CurrentPhoto | None:
        with self._photo_lock:
            return self._current_photo

    def set_current_photo(self, photo: CurrentPhoto) -> CurrentPhoto:
        with self._photo_lock:
            self._current_photo = photo
        logger.info("Current photo updated: %s by %s", photo.url, photo.author)
        return photo
