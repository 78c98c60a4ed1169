"""Prometheus duration literals.

Renders ``timedelta`` values the way Prometheus prints ``model.Duration``
(``5m``, ``1h30m``, ``30d``, ``4w``) and parses the same grammar back.
"""

from __future__ import annotations

import re
from datetime import timedelta

_MS_PER_UNIT = {
    "y": 1000 * 60 * 60 * 24 * 365,
    "w": 1000 * 60 * 60 * 24 * 7,
    "d": 1000 * 60 * 60 * 24,
    "h": 1000 * 60 * 60,
    "m": 1000 * 60,
    "s": 1000,
    "ms": 1,
}

# Years and weeks are only used when they divide the value exactly: "90d" reads
# better than "12w6d".
_EXACT_UNITS = {"y", "w"}

DURATION_PATTERN = re.compile(
    r"^(?:(\d+)y)?(?:(\d+)w)?(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?(?:(\d+)ms)?$"
)


def duration_to_prom_str(duration: timedelta) -> str:
    """Render a timedelta as a Prometheus duration literal.

    Sub-millisecond precision is dropped.

    Example:
        >>> duration_to_prom_str(timedelta(hours=720))
        '30d'
        >>> duration_to_prom_str(timedelta(minutes=90))
        '1h30m'
    """
    ms = duration // timedelta(milliseconds=1)
    if ms < 0:
        raise ValueError(f"negative duration: {duration}")
    if ms == 0:
        return "0s"

    out = []
    for unit, mult in _MS_PER_UNIT.items():
        if unit in _EXACT_UNITS and ms % mult != 0:
            continue
        value = ms // mult
        if value > 0:
            out.append(f"{value}{unit}")
            ms -= value * mult
    return "".join(out)


def parse_prom_duration(text: str) -> timedelta:
    """Parse a Prometheus duration literal such as ``30d`` or ``1h30m``.

    Raises:
        ValueError: If the text is empty or not a valid duration
    """
    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError("empty duration string")

    match = DURATION_PATTERN.match(text)
    if not match:
        raise ValueError(f"not a valid duration string: {text!r}")

    ms = 0
    for unit, value in zip(_MS_PER_UNIT, match.groups()):
        if value:
            ms += int(value) * _MS_PER_UNIT[unit]
    return timedelta(milliseconds=ms)
