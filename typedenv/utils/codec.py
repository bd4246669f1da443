"""
Typed codec: converts between raw environment strings and typed values.

Decoding never raises on bad input. A value that does not parse leaves the
seed (the zero value, or a caller default) unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from functools import partial
from ipaddress import ip_address, ip_interface, ip_network
from typing import Any

from .durations import format_duration, parse_duration
from .kinds import INT_BITS, Kind, kind_of, resolve_kind, zero_value
from .logger import get_logger
from .parsing import format_float, parse_bool, parse_float, parse_int, to_float32
from .value_objects import AddrPort

log = get_logger("typedenv.codec")

_MISSING: Any = object()

_RFC3339_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
_PREFIX_LEN_RE = re.compile(r"\d{1,3}", re.ASCII)


def parse_timestamp(text: str) -> datetime:
    """Parses an RFC 3339 date-time; the offset is mandatory."""
    m = _RFC3339_RE.fullmatch(text)
    if not m:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")
    base, frac, offset = m.groups()
    if frac:
        base = f"{base}.{frac[:6].ljust(6, '0')}"
    if offset == "Z":
        offset = "+00:00"
    return datetime.fromisoformat(base + offset)


def format_timestamp(value: datetime) -> str:
    """RFC 3339 text; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat()
    if value.utcoffset() == timedelta(0) and text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def parse_duration_or_millis(text: str) -> timedelta:
    """Unit-suffixed duration, else a bare integer count of milliseconds."""
    try:
        return parse_duration(text)
    except ValueError:
        pass
    ms = parse_int(text, 64, signed=True)
    if not -(1 << 63) <= ms * 1_000_000 < (1 << 63):
        raise ValueError(f"duration out of range: {text!r}")
    return timedelta(milliseconds=ms)


def _check_prefix_length(text: str) -> None:
    _, sep, bits = text.rpartition("/")
    if not sep or not _PREFIX_LEN_RE.fullmatch(bits):
        raise ValueError(f"expected address/prefix-length: {text!r}")


def _parse_interface(text: str):
    _check_prefix_length(text)
    return ip_interface(text)


def _parse_prefix(text: str):
    _check_prefix_length(text)
    return ip_network(text, strict=False)


_DECODERS: dict[Kind, Callable[[str], Any]] = {
    **{k: partial(parse_int, bits=bits, signed=k.is_signed) for k, bits in INT_BITS.items()},
    Kind.FLOAT32: partial(parse_float, bits=32),
    Kind.FLOAT64: parse_float,
    Kind.BOOL: parse_bool,
    Kind.STR: str,
    Kind.TIME: parse_timestamp,
    Kind.DURATION: parse_duration_or_millis,
    Kind.IP: ip_address,
    Kind.IP_NETWORK: _parse_interface,
    Kind.IP_PREFIX: _parse_prefix,
    Kind.ADDR_PORT: AddrPort.parse,
}


def decode(raw: str, kind: Any, seed: Any = _MISSING) -> Any:
    """Decodes raw into kind; returns seed (default: zero value) when parsing fails."""
    k = resolve_kind(kind)
    if seed is _MISSING:
        seed = zero_value(k)
    s = (raw or "").strip()
    try:
        return _DECODERS[k](s)
    except (ValueError, OverflowError):
        log.debug("value not parsed as %s, keeping seed", k.value)
        return seed


def _encode_float32(value: float) -> str:
    try:
        return format_float(to_float32(value), bits=32)
    except OverflowError:
        return format_float(value)


_ENCODERS: dict[Kind, Callable[[Any], str]] = {
    **{k: lambda v: str(int(v)) for k in INT_BITS},
    Kind.FLOAT32: _encode_float32,
    Kind.FLOAT64: format_float,
    Kind.BOOL: lambda v: "true" if v else "false",
    Kind.STR: str,
    Kind.TIME: format_timestamp,
    Kind.DURATION: format_duration,
}


def encode(value: Any, kind: Any = None) -> str:
    """Encodes a value to its raw string form."""
    k = kind_of(value) if kind is None else resolve_kind(kind)
    if value is None:
        return ""
    return _ENCODERS.get(k, str)(value)


def encode_many(values: Iterable[Any], kind: Any = None) -> str:
    """Encodes each value and joins them with commas."""
    return ",".join(encode(v, kind) for v in values)
