"""
Domain port for the process environment.
Stores implement this so reads and writes can run against os.environ
or against an isolated in-memory map.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentStore(Protocol):
    def get_raw(self, name: str) -> tuple[str, bool]: ...
    def set_raw(self, name: str, value: str) -> None: ...
    def unset_raw(self, name: str) -> None: ...
