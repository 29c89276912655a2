"""Components describing the running system and the current user."""

from __future__ import annotations

import os
import platform
import pwd
import socket
import sys
import time

from .util import BUFFER_SIZE, StatusError, read_int, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"


def datetime(fmt: str) -> str | None:
    """Format the current local time with a strftime format."""
    try:
        result = time.strftime(fmt, time.localtime())
    except ValueError:
        result = ""
    if not result or len(result.encode()) >= BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname(unused: str | None = None) -> str | None:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as exc:
        warn("gethostname:", exc)
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """Return the kernel release, as `uname -r` prints it."""
    release = platform.release()
    if not release:
        warn("uname: no release")
        return None
    return release


def load_avg(unused: str | None = None) -> str | None:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: int) -> str:
    """Format a number of seconds as hours and minutes."""
    hours, rest = divmod(int(seconds), 3600)
    return f"{hours}h {rest // 60}m"


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME", "CLOCK_MONOTONIC"):
        if hasattr(time, name):
            return getattr(time, name)
    raise OSError("no suitable clock")


def uptime(unused: str | None = None) -> str | None:
    """Return the system uptime in hours and minutes."""
    try:
        clock = _uptime_clock()
        seconds = time.clock_gettime(clock)
    except OSError as exc:
        warn("clock_gettime:", exc)
        return None
    return format_uptime(int(seconds))


def gid(unused: str | None = None) -> str:
    """Return the real group id of the current user."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Return the effective user id."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None


def entropy(unused: str | None = None) -> str | None:
    """Return the available kernel entropy."""
    if sys.platform.startswith("linux"):
        try:
            return str(read_int(ENTROPY_AVAIL))
        except OSError as exc:
            warn(f"fopen '{ENTROPY_AVAIL}':", exc)
            return None
        except StatusError:
            return None
    if "bsd" in sys.platform:
        return "\u221e"
    return None