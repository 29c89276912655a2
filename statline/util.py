"""Shared helpers: diagnostics, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

BUFFER_SIZE = 1024
"""Size of the buffer a single component value is formatted into."""

_LINE_LIMIT = BUFFER_SIZE - 2

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_INT_RE = re.compile(r"\s*([+-]?\d+)")


class StatusError(Exception):
    """Raised when a value cannot be read or parsed."""


def _describe(error: BaseException) -> str:
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


def warn(message: str, error: BaseException | None = None) -> None:
    """Print a diagnostic to stderr.

    A message ending in ':' is followed by a description of ``error``.
    """
    if message.endswith(":") and error is not None:
        text = f"{message} {_describe(error)}"
    else:
        text = message
    print(text, file=sys.stderr, flush=True)


def die(message: str, error: BaseException | None = None) -> None:
    """Print a diagnostic and exit with status 1."""
    warn(message, error)
    raise SystemExit(1)


def fmt_human(num: int | float, base: int) -> str:
    """Scale ``num`` by ``base`` and append the matching unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: Invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_first_line(path: str) -> str:
    """Return the first line of a file without its newline.

    At most ``BUFFER_SIZE - 2`` characters are read; an empty file gives "".
    Raises OSError if the file cannot be opened.
    """
    with open(path, encoding="utf-8", errors="replace") as fh:
        line = fh.readline(_LINE_LIMIT)
    if line.endswith("\n"):
        line = line[:-1]
    return line


def read_int(path: str) -> int:
    """Read the leading integer of a file.

    Raises OSError if the file cannot be opened and StatusError if it does
    not start with an integer.
    """
    with open(path, encoding="utf-8", errors="replace") as fh:
        text = fh.read()
    match = _INT_RE.match(text)
    if match is None:
        raise StatusError(f"{path}: no integer found")
    return int(match.group(1))