"""Exception hierarchy for toml_core."""

from __future__ import annotations


ROOT_PATH = "(root)"


class TomlError(Exception):
    """Base class for every error raised by toml_core."""


# ---------------------------------------------------------------------------
# Grammar-stage failures
# ---------------------------------------------------------------------------

class TomlParseError(TomlError):
    """Input does not match the grammar at some position."""

    def __init__(
        self,
        detail: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.detail = detail
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.detail
        if self.column is None:
            return f"{self.detail} (line {self.line})"
        return f"{self.detail} (line {self.line}, column {self.column})"


class ValueRangeError(TomlParseError):
    """A numeric or datetime literal is outside its representable range."""


class EscapeSequenceError(TomlParseError):
    """A string contains an unsupported backslash escape."""


class ArrayTypeError(TomlParseError):
    """Array elements do not share one element type."""

    def __init__(
        self,
        *,
        expected: str,
        found: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"mixed element types in array: expected {expected}, found {found}",
            line=line,
            column=column,
        )


# ---------------------------------------------------------------------------
# Tree-building failures
# ---------------------------------------------------------------------------

class TomlStructureError(TomlError):
    """Structural conflict while materializing the config tree."""

    def __init__(self, detail: str, *, key: str, path: str = ROOT_PATH) -> None:
        self.detail = detail
        self.key = key
        self.path = path
        super().__init__(f"{detail} under key group {path}: {key}")


class DuplicateKeyError(TomlStructureError):
    def __init__(self, *, key: str, path: str = ROOT_PATH) -> None:
        super().__init__("duplicate key", key=key, path=path)


class KeyGroupConflictError(TomlStructureError):
    def __init__(self, *, key: str, path: str = ROOT_PATH) -> None:
        super().__init__(
            "key already defined, cannot be used as a key group",
            key=key,
            path=path,
        )


# ---------------------------------------------------------------------------
# Accessor failures
# ---------------------------------------------------------------------------

class ConfigAccessError(TomlError):
    """Typed lookup on a ConfigNode failed."""


class MissingKeyError(ConfigAccessError, KeyError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"no such key: {path}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class ValueTypeError(ConfigAccessError, TypeError):
    def __init__(self, path: str, *, expected: str, found: str) -> None:
        self.path = path
        self.expected = expected
        self.found = found
        super().__init__(f"{path}: expected {expected}, found {found}")
