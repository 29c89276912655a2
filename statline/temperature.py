"""Temperature component reading a thermal sensor file."""

from __future__ import annotations

from .util import StatusError, read_int, warn


def temp(file: str) -> str | None:
    """Return the temperature of a sensor reporting millidegrees Celsius."""
    try:
        millidegrees = read_int(file)
    except OSError as exc:
        warn(f"fopen '{file}':", exc)
        return None
    except StatusError:
        return None
    return str(int(millidegrees / 1000))