"""CPU frequency and usage components."""

from __future__ import annotations

import sys
from typing import NamedTuple

import psutil

from .util import StatusError, fmt_human, read_int, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"


class _Times(NamedTuple):
    user: float
    nice: float
    system: float
    idle: float
    iowait: float
    irq: float
    softirq: float

    @property
    def busy(self) -> float:
        return self.user + self.nice + self.system + self.irq + self.softirq

    @property
    def total(self) -> float:
        return sum(self)


class CpuUsage:
    """Tracks aggregate CPU time between samples of a /proc/stat file."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous: _Times | None = None

    def _read(self) -> _Times | None:
        try:
            with open(self.stat_path, encoding="utf-8") as fh:
                fields = fh.readline().split()
        except OSError as exc:
            warn(f"fopen '{self.stat_path}':", exc)
            return None
        try:
            return _Times(*(float(value) for value in fields[1:8]))
        except (TypeError, ValueError):
            return None

    def sample(self) -> str | None:
        """Return usage in percent since the previous sample, if any."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous is None or previous.user == 0:
            return None
        total = current.total - previous.total
        if total == 0:
            return None
        return str(int(100 * (current.busy - previous.busy) / total))


_SYSTEM_USAGE = CpuUsage()


def cpu_freq(unused: str | None = None) -> str | None:
    """Return the current frequency of the first CPU."""
    if sys.platform.startswith("linux"):
        try:
            khz = read_int(CPU_FREQ)
        except OSError as exc:
            warn(f"fopen '{CPU_FREQ}':", exc)
            return None
        except StatusError:
            return None
        return fmt_human(khz * 1000, 1000)
    try:
        freq = psutil.cpu_freq()
    except (NotImplementedError, OSError) as exc:
        warn("cpu_freq:", exc)
        return None
    if not freq:
        return None
    return fmt_human(int(freq.current * 1_000_000), 1000)


def cpu_perc(unused: str | None = None) -> str | None:
    """Return CPU usage in percent since the previous call."""
    return _SYSTEM_USAGE.sample()