"""Network receive and transmit speed components."""

from __future__ import annotations

import sys
from typing import Callable, Union

import psutil

from .util import StatusError, fmt_human, read_int, warn

NET_RX_BYTES = "/sys/class/net/{interface}/statistics/rx_bytes"
NET_TX_BYTES = "/sys/class/net/{interface}/statistics/tx_bytes"

DEFAULT_INTERVAL = 1000
"""Milliseconds between two samples."""

_COUNTER_MODULUS = 2**64

Counter = Union[str, Callable[[str], Union[int, None]]]


class NetSpeed:
    """Turns a growing byte counter into a rate per second.

    ``counter`` is either a path template with an ``{interface}`` field or a
    callable returning the counter for an interface (None if unavailable).
    ``interval`` is the time between samples in milliseconds.
    """

    def __init__(self, counter: Counter, interval: int = DEFAULT_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.counter = counter
        self.interval = interval
        self._bytes = 0

    def _read(self, interface: str) -> int | None:
        if callable(self.counter):
            return self.counter(interface)
        path = self.counter.format(interface=interface)
        try:
            return read_int(path)
        except OSError as exc:
            warn(f"fopen '{path}':", exc)
        except StatusError:
            pass
        return None

    def sample(self, interface: str) -> str | None:
        """Return the rate since the previous sample, scaled by 1024."""
        previous = self._bytes
        current = self._read(interface)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % _COUNTER_MODULUS
        rate = (delta * 1000 % _COUNTER_MODULUS) // self.interval
        return fmt_human(rate, 1024)


def _psutil_counter(field: str) -> Callable[[str], int | None]:
    def read(interface: str) -> int | None:
        try:
            stats = psutil.net_io_counters(pernic=True)
        except OSError as exc:
            warn("getifaddrs:", exc)
            return None
        nic = stats.get(interface)
        if nic is None:
            warn("reading 'if_data' failed")
            return None
        return getattr(nic, field)

    return read


if sys.platform.startswith("linux"):
    _RX = NetSpeed(NET_RX_BYTES)
    _TX = NetSpeed(NET_TX_BYTES)
else:
    _RX = NetSpeed(_psutil_counter("bytes_recv"))
    _TX = NetSpeed(_psutil_counter("bytes_sent"))


def netspeed_rx(interface: str) -> str | None:
    """Return the receive speed of an interface."""
    return _RX.sample(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit speed of an interface."""
    return _TX.sample(interface)