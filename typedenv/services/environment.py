from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

from ..domain.ports import EnvironmentStore
from ..utils.errors import EnvironmentStoreError, ErrorCode
from ..utils.logger import get_logger

log = get_logger("typedenv.environment")


def validate_name(name: str) -> None:
    """Rejects names the platform environment cannot hold."""
    if not name or "=" in name or "\x00" in name:
        log.warning("rejected environment variable name", extra={"var": name})
        raise EnvironmentStoreError(f"invalid environment variable name: {name!r}", name=name, code=ErrorCode.INVALID_NAME)


def validate_value(name: str, value: str) -> None:
    if "\x00" in value:
        log.warning("rejected environment variable value", extra={"var": name})
        raise EnvironmentStoreError(f"invalid value for {name}: embedded NUL", name=name, code=ErrorCode.INVALID_VALUE)


class OsEnvironment:
    """EnvironmentStore backed by os.environ."""

    def get_raw(self, name: str) -> tuple[str, bool]:
        val = os.environ.get(name)
        return (val, True) if val is not None else ("", False)

    def set_raw(self, name: str, value: str) -> None:
        validate_name(name)
        validate_value(name, value)
        try:
            os.environ[name] = value
        except (OSError, ValueError) as e:
            log.warning("setenv failed", extra={"var": name, "error": str(e)})
            raise EnvironmentStoreError(f"cannot set {name}: {e}", name=name) from e

    def unset_raw(self, name: str) -> None:
        validate_name(name)
        try:
            os.environ.pop(name, None)
        except (OSError, ValueError) as e:
            log.warning("unsetenv failed", extra={"var": name, "error": str(e)})
            raise EnvironmentStoreError(f"cannot unset {name}: {e}", name=name) from e


@dataclass
class InMemoryEnvironment:
    """Isolated dict-backed EnvironmentStore."""
    _vars: dict[str, str] = field(default_factory=dict)

    def get_raw(self, name: str) -> tuple[str, bool]:
        if name in self._vars:
            return self._vars[name], True
        return "", False

    def set_raw(self, name: str, value: str) -> None:
        validate_name(name)
        validate_value(name, value)
        self._vars[name] = value

    def unset_raw(self, name: str) -> None:
        validate_name(name)
        self._vars.pop(name, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._vars)


def load_env_file(
    path: str | os.PathLike[str],
    store: EnvironmentStore | None = None,
    *,
    override: bool = False,
) -> dict[str, str]:
    """Copies KEY=VALUE entries from a .env file into the store; returns what was written."""
    target = store if store is not None else OsEnvironment()
    p = Path(path)
    if not p.is_file():
        log.info("env file not found", extra={"path": str(p)})
        return {}

    written: dict[str, str] = {}
    for name, value in dotenv_values(p).items():
        if value is None:
            continue
        if not override and target.get_raw(name)[1]:
            continue
        target.set_raw(name, value)
        written[name] = value

    log.info("env file loaded", extra={"path": str(p), "count": len(written)})
    return written
