import math
import re
import struct

_SIGNED_RE = re.compile(r"[+-]?\d+", re.ASCII)
_UNSIGNED_RE = re.compile(r"\d+", re.ASCII)
_HEX_FLOAT_RE = re.compile(r"[+-]?0x", re.ASCII | re.IGNORECASE)

TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
FALSE_VALUES = frozenset({"false", "no", "off", "0"})

_INF_LITERALS = frozenset({"inf", "infinity"})

# smallest magnitude that rounds to infinity in single precision
FLOAT32_OVERFLOW = (2 - 2**-24) * 2**127


def parse_int(text: str, bits: int = 64, signed: bool = True) -> int:
    """Parses a base-10 integer that must fit the given width."""
    pattern = _SIGNED_RE if signed else _UNSIGNED_RE
    if not pattern.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    n = int(text)
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    if not lo <= n <= hi:
        raise ValueError(f"integer out of range for {bits} bits: {text!r}")
    return n


def parse_float(text: str, bits: int = 64) -> float:
    """Parses a decimal, scientific or hex float; bits=32 rounds to single precision."""
    if not text or "_" in text or not text.isascii():
        raise ValueError(f"invalid float: {text!r}")
    if _HEX_FLOAT_RE.match(text):
        # hex mantissa needs a binary exponent: 0x1.8p0
        if "p" not in text.lower():
            raise ValueError(f"hex float without exponent: {text!r}")
        value = float.fromhex(text)
    else:
        value = float(text)
    if math.isinf(value) and text.lstrip("+-").lower() not in _INF_LITERALS:
        raise ValueError(f"float out of range: {text!r}")
    if bits == 32:
        value = to_float32(value)
    return value


def to_float32(value: float) -> float:
    """Rounds to the nearest single-precision value; raises OverflowError when out of range."""
    if math.isfinite(value) and abs(value) >= FLOAT32_OVERFLOW:
        raise OverflowError(f"float too large for single precision: {value!r}")
    return struct.unpack("f", struct.pack("f", value))[0]


def format_float(value: float, bits: int = 64) -> str:
    """Shortest text that parses back to the same value at the given width."""
    if bits != 32 or math.isnan(value) or math.isinf(value):
        return repr(float(value))
    for precision in range(1, 10):
        candidate = float("%.*g" % (precision, value))
        if to_float32(candidate) == value:
            return repr(candidate)
    return repr(float(value))


def parse_bool(text: str) -> bool:
    v = text.lower()
    if v in TRUE_VALUES:
        return True
    if v in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {text!r}")
