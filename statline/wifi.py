"""WiFi signal strength and network name components."""

from __future__ import annotations

import array
import fcntl
import re
import socket
import struct

from .util import warn

NET_OPERSTATE = "/sys/class/net/{interface}/operstate"
PROC_WIRELESS = "/proc/net/wireless"

SIOCGIWESSID = 0x8B1B
IW_ESSID_MAX_SIZE = 32
MAX_LINK_QUALITY = 70
"""Largest link quality reported in /proc/net/wireless."""

_IFNAMSIZ = 16
_IWREQ_SIZE = 32
_QUALITY_RE = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm onto 0..100."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless(text: str, interface: str) -> str | None:
    """Return the link quality of ``interface`` in percent.

    ``text`` is a /proc/net/wireless listing; the interface is looked up
    on its third line, after the two header lines.
    """
    lines = text.splitlines(keepends=True)
    if len(lines) < 3:
        return None
    line = lines[2]
    pos = line.find(interface)
    if pos < 0:
        return None
    match = _QUALITY_RE.match(line, pos + len(interface) + 2)
    if match is None:
        return None
    quality = int(match.group(1))
    return str(int(quality / MAX_LINK_QUALITY * 100))


def wifi_perc(interface: str) -> str | None:
    """Return the signal quality of a wireless interface that is up."""
    path = NET_OPERSTATE.format(interface=interface)
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            status = fh.readline(4)
    except OSError as exc:
        warn(f"fopen '{path}':", exc)
        return None
    if status != "up\n":
        return None

    try:
        with open(PROC_WIRELESS, encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError as exc:
        warn(f"fopen '{PROC_WIRELESS}':", exc)
        return None
    return parse_wireless(text, interface)


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID a wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0).ljust(
            _IWREQ_SIZE, b"\0"
        )
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn("socket 'AF_INET':", exc)
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request, True)
        except OSError as exc:
            warn("ioctl 'SIOCGIWESSID':", exc)
            return None

    value = essid.tobytes().split(b"\0", 1)[0]
    return value.decode("utf-8", errors="replace") or None