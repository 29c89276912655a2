"""Volume component for OSS mixer devices."""

from __future__ import annotations

import fcntl
import os
import struct

from .util import warn

_IOC_READ = 2
_MIXER_TYPE = ord("M")
_INT_SIZE = struct.calcsize("i")

_VOLUME_CHANNEL = 0
"""Index of "vol" among the mixer's device names."""


def _ior(number: int) -> int:
    return (_IOC_READ << 30) | (_INT_SIZE << 16) | (_MIXER_TYPE << 8) | number


SOUND_MIXER_READ_DEVMASK = _ior(0xFE)


def _read_int(fd: int, request: int) -> int:
    buf = bytearray(_INT_SIZE)
    fcntl.ioctl(fd, request, buf, True)
    return struct.unpack("i", buf)[0]


def vol_perc(card: str) -> str | None:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn(f"open '{card}':", exc)
        return None
    try:
        try:
            devmask = _read_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':", exc)
            return None
        if not devmask & (1 << _VOLUME_CHANNEL):
            return None
        try:
            level = _read_int(fd, _ior(_VOLUME_CHANNEL))
        except OSError as exc:
            warn(f"ioctl 'MIXER_READ({_VOLUME_CHANNEL})':", exc)
            return None
    finally:
        os.close(fd)
    return str(level & 0xFF)