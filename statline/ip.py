"""IP address components."""

from __future__ import annotations

import socket

import psutil

from .util import warn


def _ip(interface: str, family: int) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as exc:
        warn("getifaddrs:", exc)
        return None
    for address in addresses.get(interface, ()):
        if address.family == family:
            return address.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of an interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of an interface."""
    return _ip(interface, socket.AF_INET6)