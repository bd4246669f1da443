import re
from datetime import timedelta

_NS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT_RE = re.compile(r"(\d*)(?:\.(\d*))?(ns|us|µs|μs|ms|s|m|h)", re.ASCII)

_NS_PER_SECOND = 1_000_000_000
_NS_PER_MINUTE = 60 * _NS_PER_SECOND
# signed 64-bit nanosecond range
_MAX_NS = (1 << 63) - 1


def parse_duration(text: str) -> timedelta:
    """Parses unit-suffixed durations such as "1h30m", "1.5s", "-250ms" or "0"."""
    s = text
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"invalid duration: {text!r}")

    total_ns = 0
    pos = 0
    while pos < len(s):
        m = _COMPONENT_RE.match(s, pos)
        if not m:
            raise ValueError(f"invalid duration: {text!r}")
        whole, frac, unit = m.group(1), m.group(2) or "", m.group(3)
        if not whole and not frac:
            raise ValueError(f"invalid duration: {text!r}")
        scale = _NS_PER_UNIT[unit]
        total_ns += int(whole or "0") * scale
        if frac:
            total_ns += int(frac) * scale // 10 ** len(frac)
        pos = m.end()

    if total_ns > _MAX_NS + negative:
        raise ValueError(f"duration out of range: {text!r}")
    if negative:
        total_ns = -total_ns
    return from_nanoseconds(total_ns)


def from_nanoseconds(ns: int) -> timedelta:
    """Converts nanoseconds to a timedelta, truncating toward zero."""
    us = abs(ns) // 1_000
    return timedelta(microseconds=-us if ns < 0 else us)


def to_nanoseconds(d: timedelta) -> int:
    return ((d.days * 86400 + d.seconds) * 1_000_000 + d.microseconds) * 1_000


def format_duration(d: timedelta) -> str:
    """Formats a timedelta in the unit-suffixed form parse_duration reads back."""
    ns = to_nanoseconds(d)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)

    if u < _NS_PER_SECOND:
        if u < 1_000:
            return f"{sign}{u}ns"
        if u < 1_000_000:
            return f"{sign}{_with_fraction(u, 1_000)}µs"
        return f"{sign}{_with_fraction(u, 1_000_000)}ms"

    minutes, rem = divmod(u, _NS_PER_MINUTE)
    text = f"{_with_fraction(rem, _NS_PER_SECOND)}s"
    if minutes:
        hours, minutes = divmod(minutes, 60)
        text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def _with_fraction(value: int, unit: int) -> str:
    whole, rem = divmod(value, unit)
    if not rem:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{str(rem).rjust(width, '0').rstrip('0')}"
