from __future__ import annotations

import json
import logging
import sys
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..domain.ports import EnvironmentStore

ROOT_LOGGER = "typedenv"

_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger under the typedenv namespace."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
    env: "EnvironmentStore | None" = None,
) -> logging.Handler:
    """Attaches a stdout handler to the typedenv logger; unset options come from TYPEDENV_LOG_*."""
    from ..services.typed_env import TypedEnv

    reader = TypedEnv(env)
    level_str = (level or reader.get_default("TYPEDENV_LOG_LEVEL", "WARNING") or "WARNING").upper()
    fmt_str = (fmt or reader.get_default("TYPEDENV_LOG_FORMAT", "plain") or "plain").lower()
    use_utc = reader.get_default("TYPEDENV_LOG_UTC", True) if utc is None else utc

    lib = logging.getLogger(ROOT_LOGGER)
    for h in list(lib.handlers):
        lib.removeHandler(h)
    lib.setLevel(getattr(logging, level_str, logging.WARNING))

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))
    lib.addHandler(handler)

    get_logger("typedenv.boot").info("logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc})
    return handler
