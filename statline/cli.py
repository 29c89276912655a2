"""Status line generator: collects component values and publishes them."""

from __future__ import annotations

import os
import signal
import socket
import struct
import sys
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .battery import battery_perc, battery_state
from .files import run_command
from .ram import ram_total, ram_used
from .system import datetime
from .util import die, warn

PROG = "statline"
VERSION = "1.0"

INTERVAL = 1000
"""Milliseconds between updates."""

UNKNOWN_STR = "n/a"
"""Text shown when a value cannot be retrieved."""

MAXLEN = 2048
"""Maximum length of the status line."""


@dataclass(frozen=True)
class Arg:
    """A component, the format its value is placed in, and its argument."""

    func: Callable[[str | None], str | None]
    fmt: str
    args: str | None = None


@dataclass
class Options:
    """Command-line options."""

    single: bool = False
    once: bool = False


DEFAULT_ARGS = (
    Arg(battery_state, " %s", "BAT0"),
    Arg(battery_perc, "[%s%%]", "BAT0"),
    Arg(
        run_command,
        " [%s%%]",
        "pactl list sinks | awk '/Volume: front-left/ {print $5; exit}' | tr -d '%'",
    ),
    Arg(ram_used, " [%s/", None),
    Arg(ram_total, "%s]", None),
    Arg(datetime, " [%s]", "%F %I:%M:%S %p"),
)


def _usage() -> None:
    die(f"usage: {PROG} [-v] [-s] [-1]")


def parse_args(argv: Iterable[str]) -> Options:
    """Parse command-line arguments, exiting on -v or bad usage."""
    options = Options()
    args = list(argv)
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                die(f"{PROG}-{VERSION}")
            elif flag == "1":
                options.once = True
                options.single = True
            elif flag == "s":
                options.single = True
            else:
                _usage()
    if args:
        _usage()
    return options


def build_status(
    args: Iterable[Arg] = DEFAULT_ARGS,
    unknown: str = UNKNOWN_STR,
    maxlen: int = MAXLEN,
) -> str:
    """Concatenate the formatted value of every component.

    A value that would make the line ``maxlen`` characters or longer is cut
    short and ends the line.
    """
    status = ""
    for arg in args:
        value = arg.func(arg.args)
        if value is None:
            value = unknown
        piece = arg.fmt % value
        if len(status) + len(piece) >= maxlen:
            warn("vsnprintf: Output truncated")
            return (status + piece)[: maxlen - 1]
        status += piece
    return status


def _pad(length: int) -> int:
    return -length % 4


_COOKIE_NAME = b"MIT-MAGIC-COOKIE-1"
_CHANGE_PROPERTY = 18
_ATOM_STRING = 31
_ATOM_WM_NAME = 39


def _parse_display(name: str) -> tuple[str, int, int]:
    host, sep, rest = name.rpartition(":")
    if not sep:
        raise OSError(f"invalid display name {name!r}")
    number, _, screen = rest.partition(".")
    try:
        return host, int(number), int(screen or 0)
    except ValueError:
        raise OSError(f"invalid display name {name!r}") from None


def _xauth_entries(data: bytes) -> Iterator[tuple[int, bytes, bytes, bytes, bytes]]:
    offset = 0
    while offset + 2 <= len(data):
        (family,) = struct.unpack_from(">H", data, offset)
        offset += 2
        fields = []
        for _ in range(4):
            if offset + 2 > len(data):
                return
            (length,) = struct.unpack_from(">H", data, offset)
            offset += 2
            fields.append(data[offset : offset + length])
            offset += length
        address, number, name, cookie = fields
        yield family, address, number, name, cookie


def _find_auth(number: int) -> tuple[bytes, bytes]:
    path = os.environ.get("XAUTHORITY") or os.path.expanduser("~/.Xauthority")
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError:
        return b"", b""
    wanted = str(number).encode()
    for _family, _address, entry_number, name, cookie in _xauth_entries(data):
        if name == _COOKIE_NAME and entry_number in (b"", wanted):
            return name, cookie
    return b"", b""


class _Display:
    """A minimal X11 connection able to set the root window's name."""

    def __init__(self, name: str | None = None) -> None:
        if name is None:
            name = os.environ.get("DISPLAY", "")
        host, number, screen = _parse_display(name)
        if host in ("", "unix"):
            self._sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            try:
                self._sock.connect(f"/tmp/.X11-unix/X{number}")
            except OSError:
                self._sock.close()
                raise
        else:
            self._sock = socket.create_connection((host, 6000 + number))
        try:
            self.root = self._setup(*_find_auth(number), screen)
        except (OSError, struct.error, IndexError):
            self._sock.close()
            raise OSError("X11 connection setup failed") from None

    def __enter__(self) -> _Display:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _recv(self, size: int) -> bytes:
        data = bytearray()
        while len(data) < size:
            chunk = self._sock.recv(size - len(data))
            if not chunk:
                raise OSError("connection closed by server")
            data += chunk
        return bytes(data)

    def _setup(self, auth_name: bytes, auth_data: bytes, screen: int) -> int:
        request = (
            struct.pack("<BxHHHH2x", 0x6C, 11, 0, len(auth_name), len(auth_data))
            + auth_name
            + b"\0" * _pad(len(auth_name))
            + auth_data
            + b"\0" * _pad(len(auth_data))
        )
        self._sock.sendall(request)
        status, reason_len, _major, _minor, length = struct.unpack(
            "<BBHHH", self._recv(8)
        )
        data = self._recv(length * 4)
        if status != 1:
            reason = data[:reason_len] if status == 0 else data
            raise OSError(reason.decode(errors="replace").strip())

        (vendor_len,) = struct.unpack_from("<H", data, 16)
        nscreens, nformats = data[20], data[21]
        if screen >= nscreens:
            raise OSError(f"no screen {screen}")
        offset = 32 + vendor_len + _pad(vendor_len) + 8 * nformats
        for _ in range(screen):
            ndepths = data[offset + 39]
            offset += 40
            for _ in range(ndepths):
                (nvisuals,) = struct.unpack_from("<H", data, offset + 2)
                offset += 8 + 24 * nvisuals
        (root,) = struct.unpack_from("<I", data, offset)
        return root

    def store_name(self, text: str | None) -> None:
        """Set the name of the root window; None clears it."""
        data = (text or "").encode("utf-8")
        pad = _pad(len(data))
        request = struct.pack(
            "<BBHIIIB3xI",
            _CHANGE_PROPERTY,
            0,
            6 + (len(data) + pad) // 4,
            self.root,
            _ATOM_WM_NAME,
            _ATOM_STRING,
            8,
            len(data),
        )
        self._sock.sendall(request + data + b"\0" * pad)

    def close(self) -> None:
        self._sock.close()


class _Stopper:
    """Signal-driven loop control: SIGINT/SIGTERM stop, SIGUSR1 refreshes."""

    def __init__(self, done: bool) -> None:
        self.done = done
        self._wake = threading.Event()

    def handle(self, signo: int, frame: object) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        self._wake.set()

    def sleep(self, seconds: float) -> None:
        self._wake.wait(seconds)
        self._wake.clear()


def main(argv: list[str] | None = None) -> int:
    """Publish the status line to stdout or the X root window."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    stopper = _Stopper(options.once)
    signals = (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1)
    previous = {signo: signal.signal(signo, stopper.handle) for signo in signals}
    display = None
    try:
        if not options.single:
            try:
                display = _Display()
            except OSError:
                die("XOpenDisplay: Failed to open display")

        while True:
            start = time.monotonic()
            status = build_status(DEFAULT_ARGS, UNKNOWN_STR, MAXLEN)
            if display is None:
                try:
                    print(status, flush=True)
                except OSError as exc:
                    die("puts:", exc)
            else:
                try:
                    display.store_name(status)
                except OSError:
                    die("XStoreName: Allocation failed")

            if stopper.done:
                break
            remaining = INTERVAL / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                stopper.sleep(remaining)
            if stopper.done:
                break
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)

    if display is not None:
        try:
            display.store_name(None)
            display.close()
        except OSError:
            die("XCloseDisplay: Failed to close display")
    return 0