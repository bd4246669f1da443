from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..domain.ports import EnvironmentStore
from ..utils.codec import decode, encode, encode_many
from ..utils.errors import UnsupportedTypeError
from ..utils.kinds import Kind, kind_of, resolve_kind, zero_value
from .environment import OsEnvironment


class TypedEnv:
    """Typed reads and writes over an EnvironmentStore."""

    def __init__(self, store: EnvironmentStore | None = None) -> None:
        self.store = store if store is not None else OsEnvironment()

    def get(self, name: str, kind: Any) -> Any:
        """Returns the decoded value, or the zero value when absent or invalid."""
        k = resolve_kind(kind)
        raw, _ = self.store.get_raw(name)
        return decode(raw, k)

    def get_default(self, name: str, default: Any, kind: Any = None) -> Any:
        """Returns default itself when absent; otherwise decodes with default as the seed."""
        k = kind_of(default) if kind is None else resolve_kind(kind)
        raw, ok = self.store.get_raw(name)
        if not ok:
            return default
        return decode(raw, k, default)

    def set(self, name: str, value: Any, kind: Any = None) -> None:
        k = kind_of(value) if kind is None else resolve_kind(kind)
        self.store.set_raw(name, encode(value, k))

    def unset(self, name: str) -> None:
        self.store.unset_raw(name)

    def get_slice(self, name: str, kind: Any) -> list[Any]:
        """Splits on commas and decodes every segment; absent or empty yields []."""
        k = resolve_kind(kind)
        raw, _ = self.store.get_raw(name)
        if raw == "":
            return []
        return [decode(seg, k) for seg in raw.split(",")]

    def get_slice_default(self, name: str, default: Sequence[Any], kind: Any = None) -> Sequence[Any]:
        """
        Returns default itself when absent or when no non-blank segment remains.
        Otherwise element i is decoded with default[i] (or the zero value) as the seed.
        An empty default carries no kind, so pass kind explicitly, even for an absent name.
        """
        k = _slice_kind(default, kind)
        raw, ok = self.store.get_raw(name)
        if not ok:
            return default
        segments = [s for s in (seg.strip() for seg in raw.split(",")) if s]
        if not segments:
            return default
        out: list[Any] = []
        for i, seg in enumerate(segments):
            seed = default[i] if i < len(default) else zero_value(k)
            out.append(decode(seg, k, seed))
        return out

    def set_slice(self, name: str, values: Sequence[Any], kind: Any = None) -> None:
        k = _slice_kind(values, kind)
        self.store.set_raw(name, encode_many(values, k))


def _slice_kind(values: Sequence[Any], kind: Any) -> Kind:
    if kind is not None:
        return resolve_kind(kind)
    for v in values:
        if v is not None:
            return kind_of(v)
    raise UnsupportedTypeError("cannot infer kind from an empty sequence; pass kind explicitly")
