"""ConfigNode: the materialized configuration tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator, Sequence, Union

from .errors import (
    DuplicateKeyError,
    KeyGroupConflictError,
    MissingKeyError,
    ValueTypeError,
)
from .values import (
    Value,
    VArray,
    VBool,
    VDateTime,
    VFloat,
    VInteger,
    VString,
    unwrap,
)


Entry = Union[Value, "ConfigNode"]
PathLike = Union[str, Sequence[str]]


def _split(path: PathLike) -> tuple[str, ...]:
    if isinstance(path, str):
        return tuple(path.split("."))
    return tuple(path)


def _describe(entry: Entry) -> str:
    if isinstance(entry, ConfigNode):
        return "table"
    return str(entry.kind)


@dataclass
class ConfigNode:
    """Mapping from key to a Value or a nested ConfigNode.

    Keys are unique. A key bound to a Value cannot be reused as a key group
    and a key group cannot be rebound to a Value; both raise instead of
    overwriting.
    """

    entries: dict[str, Entry] = field(default_factory=dict)

    # -- Building -------------------------------------------------------

    def insert(self, key: str, value: Value, *, path: str) -> None:
        """Bind *key* to *value*; *path* names this node in error messages."""
        if key in self.entries:
            raise DuplicateKeyError(key=key, path=path)
        self.entries[key] = value

    def child(self, key: str, *, path: str) -> ConfigNode:
        """Return the sub-node at *key*, creating it on first visit."""
        existing = self.entries.get(key)
        if existing is None:
            node = ConfigNode()
            self.entries[key] = node
            return node
        if not isinstance(existing, ConfigNode):
            raise KeyGroupConflictError(key=key, path=path)
        return existing

    # -- Mapping protocol -------------------------------------------------

    def __getitem__(self, key: str) -> Entry:
        try:
            return self.entries[key]
        except KeyError:
            raise MissingKeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    # -- Path lookup ------------------------------------------------------

    def lookup(self, path: PathLike) -> Entry:
        """Resolve a dotted path (or a sequence of segments) to an entry."""
        parts = _split(path)
        current: Entry = self
        for depth, part in enumerate(parts):
            if not isinstance(current, ConfigNode):
                raise ValueTypeError(
                    ".".join(parts[:depth]), expected="table", found=_describe(current)
                )
            if part not in current.entries:
                raise MissingKeyError(".".join(parts[: depth + 1]))
            current = current.entries[part]
        return current

    def get(self, path: PathLike, default: Any = None) -> Any:
        """Plain Python value at *path*, or *default* when it does not exist."""
        try:
            entry = self.lookup(path)
        except MissingKeyError:
            return default
        if isinstance(entry, ConfigNode):
            return entry
        return unwrap(entry)

    def get_value(self, path: PathLike) -> Value:
        return self._typed(path, None)

    # -- Typed accessors --------------------------------------------------

    def get_string(self, path: PathLike) -> str:
        return self._typed(path, VString).value

    def get_int(self, path: PathLike) -> int:
        return self._typed(path, VInteger).value

    def get_float(self, path: PathLike) -> float:
        return self._typed(path, VFloat).value

    def get_bool(self, path: PathLike) -> bool:
        return self._typed(path, VBool).value

    def get_datetime(self, path: PathLike) -> datetime:
        return self._typed(path, VDateTime).value

    def get_array(self, path: PathLike) -> list:
        return unwrap(self._typed(path, VArray))

    def get_table(self, path: PathLike) -> ConfigNode:
        entry = self.lookup(path)
        if not isinstance(entry, ConfigNode):
            raise ValueTypeError(_dotted(path), expected="table", found=_describe(entry))
        return entry

    def _typed(self, path: PathLike, cls):
        entry = self.lookup(path)
        if isinstance(entry, ConfigNode):
            expected = "value" if cls is None else str(cls.kind)
            raise ValueTypeError(_dotted(path), expected=expected, found="table")
        if cls is not None and not isinstance(entry, cls):
            raise ValueTypeError(_dotted(path), expected=str(cls.kind), found=str(entry.kind))
        return entry

    # -- Conversion -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Nested plain-Python copy of the tree."""
        out: dict[str, Any] = {}
        for key, entry in self.entries.items():
            if isinstance(entry, ConfigNode):
                out[key] = entry.to_dict()
            else:
                out[key] = unwrap(entry)
        return out

    def count_values(self) -> int:
        """Number of Values in this subtree (key groups excluded)."""
        return sum(
            e.count_values() if isinstance(e, ConfigNode) else 1
            for e in self.entries.values()
        )


def _dotted(path: PathLike) -> str:
    return ".".join(_split(path))
