"""
Closed set of value kinds the codec understands.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from ipaddress import (
    IPv4Address,
    IPv4Interface,
    IPv4Network,
    IPv6Address,
    IPv6Interface,
    IPv6Network,
)
from typing import Any

from .errors import UnsupportedTypeError
from .value_objects import AddrPort


class Kind(str, Enum):
    """Supported value kinds."""
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"

    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    FLOAT32 = "float32"
    FLOAT64 = "float64"

    BOOL = "bool"
    STR = "str"

    TIME = "time"
    DURATION = "duration"

    IP = "ip"
    IP_NETWORK = "ip_network"
    IP_PREFIX = "ip_prefix"
    ADDR_PORT = "addr_port"

    @property
    def is_integer(self) -> bool:
        return self in INT_BITS

    @property
    def is_signed(self) -> bool:
        return self.value.startswith("int")


# bit width per integer kind; INT and UINT are 64-bit
INT_BITS: dict[Kind, int] = {
    Kind.INT: 64,
    Kind.INT8: 8,
    Kind.INT16: 16,
    Kind.INT32: 32,
    Kind.INT64: 64,
    Kind.UINT: 64,
    Kind.UINT8: 8,
    Kind.UINT16: 16,
    Kind.UINT32: 32,
    Kind.UINT64: 64,
}

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TYPE_KINDS: dict[type, Kind] = {
    bool: Kind.BOOL,
    int: Kind.INT,
    float: Kind.FLOAT64,
    str: Kind.STR,
    datetime: Kind.TIME,
    timedelta: Kind.DURATION,
    IPv4Address: Kind.IP,
    IPv6Address: Kind.IP,
    IPv4Interface: Kind.IP_NETWORK,
    IPv6Interface: Kind.IP_NETWORK,
    IPv4Network: Kind.IP_PREFIX,
    IPv6Network: Kind.IP_PREFIX,
    AddrPort: Kind.ADDR_PORT,
}


def zero_value(kind: Kind) -> Any:
    """Returns the value a read starts from when no default is given."""
    if kind.is_integer:
        return 0
    if kind in (Kind.FLOAT32, Kind.FLOAT64):
        return 0.0
    if kind is Kind.BOOL:
        return False
    if kind is Kind.STR:
        return ""
    if kind is Kind.TIME:
        return ZERO_TIME
    if kind is Kind.DURATION:
        return timedelta(0)
    return None


def resolve_kind(target: Any) -> Kind:
    """Maps a Kind, kind name or Python type onto a Kind."""
    if isinstance(target, Kind):
        return target
    if isinstance(target, str):
        try:
            return Kind(target.lower())
        except ValueError:
            raise UnsupportedTypeError(f"unsupported kind: {target!r}") from None
    if isinstance(target, type):
        # exact match first so bool does not resolve through int
        if target in _TYPE_KINDS:
            return _TYPE_KINDS[target]
        for cls, kind in _TYPE_KINDS.items():
            if issubclass(target, cls):
                return kind
    raise UnsupportedTypeError(f"unsupported type: {target!r}")


def kind_of(value: Any) -> Kind:
    """Infers the Kind of a value instance."""
    if value is None:
        raise UnsupportedTypeError("cannot infer kind from None; pass kind explicitly")
    return resolve_kind(type(value))
