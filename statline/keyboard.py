"""Keyboard layout and lock indicator formatting."""

from __future__ import annotations

import re
import string

_INVALID = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:]")
_FMT_LIMIT = 4


def valid_layout_or_variant(sym: str) -> bool:
    """Tell whether an xkb symbol names a layout rather than a rule set."""
    return not sym.startswith(_INVALID)


def get_layout(syms: str, group: int) -> str | None:
    """Return the layout of keyboard group ``group`` from an xkb symbols name."""
    layout = None
    count = 0
    for token in filter(None, _SEPARATORS.split(syms)):
        if count > group:
            break
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token in string.digits:
            continue
        layout = token
        count += 1
    return layout


def format_indicators(fmt: str, led_mask: int) -> str:
    """Render caps lock and num lock state following ``fmt``.

    ``fmt`` holds 'c' (caps lock) and/or 'n' (num lock), in either case,
    each optionally followed by '?'. With '?' the letter appears as written
    only while the indicator is on; otherwise it always appears, lowercase
    when off and uppercase when on. Only the first four characters count.
    """
    fmt = fmt[:_FMT_LIMIT]
    out = []
    for i, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = fmt[i + 1 : i + 2] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)