"""System module for host hardware status."""

from idleview.system.status import CpuTemp, read_cpu_temp

__all__ = ["CpuTemp", "read_cpu_temp"]
