"""
Typed access to process environment variables.

    import typedenv
    from typedenv import Kind

    port = typedenv.get_default("PORT", 8080)
    timeout = typedenv.get_default("TIMEOUT", timedelta(seconds=5))
    peers = typedenv.get_slice("PEERS", Kind.ADDR_PORT)
"""

from collections.abc import Sequence
from typing import Any

from .domain import EnvironmentStore
from .services import InMemoryEnvironment, OsEnvironment, TypedEnv, load_env_file
from .utils import (
    AddrPort,
    Config,
    EnvConfig,
    EnvironmentStoreError,
    ErrorCode,
    Kind,
    MissingVariableError,
    TypedEnvError,
    UnsupportedTypeError,
    configure_logging,
    decode,
    encode,
    encode_many,
    get_logger,
    zero_value,
)

_default = TypedEnv()


def use_store(store: EnvironmentStore | None) -> EnvironmentStore:
    """Points the module-level functions at another store; None restores os.environ."""
    _default.store = store if store is not None else OsEnvironment()
    return _default.store


def get(name: str, kind: Any) -> Any:
    return _default.get(name, kind)


def get_default(name: str, default: Any, kind: Any = None) -> Any:
    return _default.get_default(name, default, kind)


def set(name: str, value: Any, kind: Any = None) -> None:
    _default.set(name, value, kind)


def unset(name: str) -> None:
    _default.unset(name)


def get_slice(name: str, kind: Any) -> list[Any]:
    return _default.get_slice(name, kind)


def get_slice_default(name: str, default: Sequence[Any], kind: Any = None) -> Sequence[Any]:
    return _default.get_slice_default(name, default, kind)


def set_slice(name: str, values: Sequence[Any], kind: Any = None) -> None:
    _default.set_slice(name, values, kind)


__all__ = [
    "get",
    "get_default",
    "set",
    "unset",
    "get_slice",
    "get_slice_default",
    "set_slice",
    "use_store",
    "TypedEnv",
    "EnvironmentStore",
    "OsEnvironment",
    "InMemoryEnvironment",
    "load_env_file",
    "Config",
    "EnvConfig",
    "Kind",
    "AddrPort",
    "decode",
    "encode",
    "encode_many",
    "zero_value",
    "TypedEnvError",
    "EnvironmentStoreError",
    "MissingVariableError",
    "UnsupportedTypeError",
    "ErrorCode",
    "configure_logging",
    "get_logger",
]
