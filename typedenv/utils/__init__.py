from .codec import (
    decode,
    encode,
    encode_many,
    format_timestamp,
    parse_duration_or_millis,
    parse_timestamp,
)
from .config import Config, EnvConfig
from .durations import format_duration, parse_duration
from .errors import (
    EnvironmentStoreError,
    ErrorCode,
    MissingVariableError,
    TypedEnvError,
    UnsupportedTypeError,
)
from .kinds import INT_BITS, ZERO_TIME, Kind, kind_of, resolve_kind, zero_value
from .logger import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
)
from .parsing import (
    format_float,
    parse_bool,
    parse_float,
    parse_int,
    to_float32,
)
from .value_objects import AddrPort

__all__ = [
    "Config",
    "EnvConfig",
    "Kind",
    "INT_BITS",
    "ZERO_TIME",
    "kind_of",
    "resolve_kind",
    "zero_value",
    "decode",
    "encode",
    "encode_many",
    "parse_timestamp",
    "format_timestamp",
    "parse_duration",
    "parse_duration_or_millis",
    "format_duration",
    "parse_int",
    "parse_float",
    "parse_bool",
    "format_float",
    "to_float32",
    "AddrPort",
    "TypedEnvError",
    "EnvironmentStoreError",
    "MissingVariableError",
    "UnsupportedTypeError",
    "ErrorCode",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
]
