"""Value types for toml_core."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Union


class ValueKind(Enum):
    Integer = "integer"
    Float = "float"
    Boolean = "boolean"
    DateTime = "datetime"
    String = "string"
    Array = "array"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VInteger:
    value: int
    kind: ClassVar[ValueKind] = ValueKind.Integer

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class VFloat:
    value: float
    kind: ClassVar[ValueKind] = ValueKind.Float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(slots=True)
class VBool:
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.Boolean

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(slots=True)
class VDateTime:
    value: datetime  # always UTC
    kind: ClassVar[ValueKind] = ValueKind.DateTime

    def __str__(self) -> str:
        return self.value.strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(slots=True)
class VString:
    value: str
    kind: ClassVar[ValueKind] = ValueKind.String

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VArray:
    items: list["Value"]
    kind: ClassVar[ValueKind] = ValueKind.Array

    def __str__(self) -> str:
        return "[" + ", ".join(_fmt_item(v) for v in self.items) + "]"

    def element_kind(self) -> ValueKind | None:
        """Scalar kind shared by the non-array items, or None if there are none."""
        for item in self.items:
            if item.kind is not ValueKind.Array:
                return item.kind
        return None


Value = Union[VInteger, VFloat, VBool, VDateTime, VString, VArray]


def _fmt_item(value: Value) -> str:
    if isinstance(value, VString):
        return f'"{value.value}"'
    return str(value)


def unwrap(value: Value) -> Any:
    """Convert a Value to the matching plain Python object."""
    if isinstance(value, VArray):
        return [unwrap(v) for v in value.items]
    return value.value
