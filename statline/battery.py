"""Battery components backed by the power-supply class in sysfs."""

from __future__ import annotations

import os
import re

from .util import StatusError, read_int, warn

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_RE = re.compile(r"[a-zA-Z ]{1,12}")

_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}


def _path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY, bat, name)


def _read_number(path: str) -> int | None:
    try:
        return read_int(path)
    except OSError as exc:
        warn(f"fopen '{path}':", exc)
    except StatusError:
        pass
    return None


def _read_state(bat: str) -> str | None:
    path = _path(bat, "status")
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError as exc:
        warn(f"fopen '{path}':", exc)
        return None
    match = _STATE_RE.match(text)
    return match.group(0) if match else None


def _pick(bat: str, *names: str) -> str | None:
    for name in names:
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str) -> str | None:
    """Return the battery charge in percent."""
    capacity = _read_number(_path(bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str) -> str | None:
    """Return '+', '-', 'o' or '?' for the charging state."""
    state = _read_state(bat)
    if state is None:
        return None
    return _SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Return the time left while discharging, or "" otherwise."""
    state = _read_state(bat)
    if state is None:
        return None

    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = _read_number(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = _read_number(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"