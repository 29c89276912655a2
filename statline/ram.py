"""Memory usage components read from /proc/meminfo."""

from __future__ import annotations

import re

from .util import fmt_human, warn

MEMINFO = "/proc/meminfo"

_LINE_RE = re.compile(r"^([^:\s]+):\s*(\d+)", re.MULTILINE)


def parse_meminfo(text: str) -> dict[str, int]:
    """Map each field of a meminfo listing to its value in kB."""
    return {m.group(1): int(m.group(2)) for m in _LINE_RE.finditer(text)}


def _fields(*names: str) -> tuple[int, ...] | None:
    try:
        with open(MEMINFO, encoding="utf-8") as fh:
            info = parse_meminfo(fh.read())
    except OSError as exc:
        warn(f"fopen '{MEMINFO}':", exc)
        return None
    try:
        return tuple(info[name] for name in names)
    except KeyError:
        return None


def ram_free(unused: str | None = None) -> str | None:
    """Return the memory available for new allocations."""
    fields = _fields("MemAvailable")
    if fields is None:
        return None
    (available,) = fields
    return fmt_human(available * 1024, 1024)


def ram_perc(unused: str | None = None) -> str | None:
    """Return memory usage in percent, not counting buffers and cache."""
    fields = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if fields is None:
        return None
    total, free, buffers, cached = fields
    if total == 0:
        return None
    return str(int(100 * ((total - free) - (buffers + cached)) / total))


def ram_total(unused: str | None = None) -> str | None:
    """Return the total memory size."""
    fields = _fields("MemTotal")
    if fields is None:
        return None
    (total,) = fields
    return fmt_human(total * 1024, 1024)


def ram_used(unused: str | None = None) -> str | None:
    """Return the memory in use, not counting buffers and cache."""
    fields = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if fields is None:
        return None
    total, free, buffers, cached = fields
    return fmt_human((total - free - buffers - cached) * 1024, 1024)