"""Host hardware status shown on the idle display."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from idleview.display.units import UnitConverter
from idleview.settings.document import UnitsSettings

logger: Final = logging.getLogger(__name__)

THERMAL_ZONE: Final = Path("/sys/class/thermal/thermal_zone0/temp")


@dataclass
class CpuTemp:
    """CPU temperature reading.

    ``value`` is always in Celsius; ``display`` is rounded and expressed
    in the configured unit, or empty when no sensor is available.
    """

    value: float
    display: str

    @classmethod
    def unavailable(cls) -> CpuTemp:
        return cls(value=0.0, display="")


def read_cpu_temp(units: UnitsSettings, sensor: Path = THERMAL_ZONE) -> CpuTemp:
    """Read the CPU temperature from a Linux thermal zone.

    Args:
        units: Unit settings deciding Celsius or Fahrenheit display
        sensor: Sysfs file holding millidegrees Celsius

    Returns:
        The reading, or an empty reading when the sensor is missing,
        unreadable or reports a non-positive value
    """
    try:
        millidegrees = int(sensor.read_text().strip())
    except (OSError, ValueError) as exc:
        logger.debug("CPU temperature unavailable: %s", exc)
        return CpuTemp.unavailable()

    celsius = millidegrees / 1000.0
    if celsius <= 0.0:
        return CpuTemp.unavailable()

    shown = UnitConverter.temperature(celsius, units)
    return CpuTemp(value=celsius, display=f"{round(shown)} {UnitConverter.temperature_symbol(units)}")
