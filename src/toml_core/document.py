"""Document: the grammar-stage result handed to the tree builder."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ROOT_PATH
from .values import Value


KeyGroupPath = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class KeyValue:
    key: str
    value: Value
    line: int | None = field(default=None, compare=False)


@dataclass(slots=True)
class Section:
    """A key-group header and the key/values that follow it."""

    path: KeyGroupPath
    values: list[KeyValue] = field(default_factory=list)
    line: int | None = field(default=None, compare=False)


@dataclass(slots=True)
class Document:
    """Root key/values (before any key group) plus sections in source order."""

    root_values: list[KeyValue] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.root_values and not self.sections


def format_path(path: KeyGroupPath) -> str:
    return ".".join(path) if path else ROOT_PATH
