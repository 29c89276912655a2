"""Swap usage components read from /proc/meminfo."""

from __future__ import annotations

import re
from typing import NamedTuple

from .util import fmt_human, warn

MEMINFO = "/proc/meminfo"

_FIELDS = {"SwapTotal": "total", "SwapFree": "free", "SwapCached": "cached"}
_LINE_RE = re.compile(r"^(SwapTotal|SwapFree|SwapCached):\s*([+-]?\d+)", re.MULTILINE)


class SwapInfo(NamedTuple):
    """Swap figures in kB; a field missing from the input is None."""

    total: int | None = None
    free: int | None = None
    cached: int | None = None


def parse_swap(text: str) -> SwapInfo:
    """Extract the swap fields of a meminfo listing."""
    values: dict[str, int] = {}
    for match in _LINE_RE.finditer(text):
        values.setdefault(_FIELDS[match.group(1)], int(match.group(2)))
    return SwapInfo(**values)


def _info() -> SwapInfo | None:
    try:
        with open(MEMINFO, encoding="utf-8") as fh:
            return parse_swap(fh.read())
    except OSError as exc:
        warn(f"fopen '{MEMINFO}':", exc)
        return None


def _used(info: SwapInfo) -> int | None:
    if None in info:
        return None
    return info.total - info.free - info.cached


def swap_free(unused: str | None = None) -> str | None:
    """Return the free swap space."""
    info = _info()
    if info is None or info.free is None:
        return None
    return fmt_human(info.free * 1024, 1024)


def swap_perc(unused: str | None = None) -> str | None:
    """Return swap usage in percent."""
    info = _info()
    if info is None or not info.total:
        return None
    used = _used(info)
    if used is None:
        return None
    return str(int(100 * used / info.total))


def swap_total(unused: str | None = None) -> str | None:
    """Return the total swap space."""
    info = _info()
    if info is None or info.total is None:
        return None
    return fmt_human(info.total * 1024, 1024)


def swap_used(unused: str | None = None) -> str | None:
    """Return the swap space in use."""
    info = _info()
    if info is None:
        return None
    used = _used(info)
    if used is None:
        return None
    return fmt_human(used * 1024, 1024)