"""Command layer invoked by the GUI shell.

The GUI calls commands by name with JSON arguments and receives either
a JSON value or an error string; it never sees a Python exception.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from idleview.api.facade import IdleviewAPI
from idleview.context.models import WeatherObservation
from idleview.errors import IdleviewError, ValidationError
from idleview.photos.unsplash import CurrentPhoto

logger: Final = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of one command: ``value`` on success, ``error`` otherwise."""

    ok: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def success(cls, value: Any) -> CommandResult:
        return cls(ok=True, value=_to_json(value))

    @classmethod
    def failure(cls, error: str) -> CommandResult:
        return cls(ok=False, error=error)


def _to_json(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if hasattr(value, "__dataclass_fields__"):
        return dict(vars(value))
    return value


def _observation(weather: WeatherObservation | dict[str, Any]) -> WeatherObservation:
    if isinstance(weather, WeatherObservation):
        return weather
    try:
        return WeatherObservation.model_validate(weather)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc, "Invalid weather data") from exc


class CommandDispatcher:
    """Maps GUI command names onto :class:`IdleviewAPI` operations."""

    def __init__(self, api: IdleviewAPI) -> None:
        self.api = api
        self._commands: dict[str, Callable[..., Any]] = {
            "get_settings": api.get_settings,
            "save_settings": lambda settings: api.replace_settings(settings),
            "reset_settings": api.reset_settings,
            "get_season": api.season,
            "get_holiday": api.holiday,
            "get_time_of_day": lambda sunrise_iso=None, sunset_iso=None: api.time_of_day(
                sunrise_iso, sunset_iso
            ),
            "build_photo_query": self._build_photo_query,
            "get_current_time": api.current_time,
            "get_precipitation_display": lambda weather: api.precipitation_display(
                _observation(weather)
            ),
            "is_cache_valid": api.is_cache_valid,
            "format_time_remaining": api.format_time_remaining,
            "get_cpu_temp": api.cpu_temp,
            "get_debug_info": api.debug_info,
            "get_location": api.get_location,
            "get_weather": api.get_weather,
            "get_unsplash_photo": api.get_unsplash_photo,
            "trigger_unsplash_download": api.trigger_unsplash_download,
            "set_current_photo": lambda photo: api.set_current_photo(
                CurrentPhoto.model_validate(photo)
            ),
        }

    @property
    def names(self) -> list[str]:
        return sorted(self._commands)

    def _build_photo_query(
        self,
        cloudcover: float,
        rain: float,
        snowfall: float,
        sunrise_iso: str | None = None,
        sunset_iso: str | None = None,
        enable_festive: bool | None = None,
    ) -> Any:
        weather = WeatherObservation(cloudcover=cloudcover, rain=rain, snowfall=snowfall)
        festive = True if enable_festive is None else enable_festive
        return self.api.photo_query(weather, sunrise_iso, sunset_iso, festive)

    def invoke(self, name: str, **kwargs: Any) -> CommandResult:
        """Run command *name* with keyword arguments from the GUI.

        Returns:
            A successful result with a JSON-ready value, or a failed
            result carrying the error message
        """
        command = self._commands.get(name)
        if command is None:
            return CommandResult.failure(f"Unknown command: {name}")

        try:
            return CommandResult.success(command(**kwargs))
        except IdleviewError as exc:
            logger.error("Command %s failed: %s", name, exc)
            return CommandResult.failure(str(exc))
        except (TypeError, PydanticValidationError) as exc:
            logger.error("Command %s called with bad arguments: %s", name, exc)
            return CommandResult.failure(f"Invalid arguments for {name}: {exc}")
