from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Protocol

from .errors import MissingVariableError
from .kinds import Kind

if TYPE_CHECKING:
    from ..domain.ports import EnvironmentStore


class Config(Protocol):
    """Typed config interface."""
    def get_str(self, name: str, default: str | None = None) -> str | None:
        ...
    def get_str_required(self, name: str) -> str:
        ...
    def get_bool(self, name: str, default: bool = False) -> bool:
        ...
    def get_int(self, name: str, default: int = 0) -> int:
        ...
    def get_float(self, name: str, default: float = 0.0) -> float:
        ...
    def get_duration(self, name: str, default: timedelta = timedelta(0)) -> timedelta:
        ...
    def get_list(self, name: str, default: list[str] | None = None) -> list[str]:
        ...


class EnvConfig:
    """Environment-backed config provider."""
    def __init__(self, store: "EnvironmentStore | None" = None) -> None:
        from ..services.typed_env import TypedEnv

        self.env = TypedEnv(store)

    def get_str(self, name: str, default: str | None = None) -> str | None:
        raw, ok = self.env.store.get_raw(name)
        return raw.strip() if ok else default

    def get_str_required(self, name: str) -> str:
        val = self.get_str(name)
        if not val:
            raise MissingVariableError(f"Missing required environment variable: {name}", name=name)
        return val

    def get_bool(self, name: str, default: bool = False) -> bool:
        return self.env.get_default(name, default, Kind.BOOL)

    def get_int(self, name: str, default: int = 0) -> int:
        return self.env.get_default(name, default, Kind.INT)

    def get_float(self, name: str, default: float = 0.0) -> float:
        return self.env.get_default(name, default, Kind.FLOAT64)

    def get_duration(self, name: str, default: timedelta = timedelta(0)) -> timedelta:
        return self.env.get_default(name, default, Kind.DURATION)

    def get_list(self, name: str, default: list[str] | None = None) -> list[str]:
        return list(self.env.get_slice_default(name, default or [], Kind.STR))
