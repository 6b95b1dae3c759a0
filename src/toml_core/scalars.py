"""Scalar literal parsers.

Each parser takes the raw text of one token and returns a typed Value or
raises a :class:`~toml_core.errors.TomlParseError` subclass. ``line`` and
``column`` are only used to locate the error.

:data:`SCALAR_RULES` lists the scalar forms in dispatch priority order
(DateTime, String, Float, Integer, Boolean). The grammar builds its
terminals from this table, so a datetime is never lexed as an integer
expression and a string's digits are never coerced to a number.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from .errors import EscapeSequenceError, TomlParseError, ValueRangeError
from .values import Value, ValueKind, VBool, VDateTime, VFloat, VInteger, VString


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DATETIME_PATTERN = r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}Z"
STRING_PATTERN = r'"(?:[^"\\\r\n]|\\.)*"'
FLOAT_PATTERN = r"-?[0-9]+\.[0-9]+"
INTEGER_PATTERN = r"-?[0-9]+"
BOOLEAN_PATTERN = r"true|false"

_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_ESCAPES: dict[str, str] = {
    "0": "\0",
    "t": "\t",
    "n": "\n",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

_ESCAPE_RE = re.compile(r"\\(.?)", re.DOTALL)


def _check(pattern: str, text: str, what: str, line: int | None, column: int | None) -> None:
    if re.fullmatch(pattern, text) is None:
        raise TomlParseError(f"invalid {what}: {text!r}", line=line, column=column)


# ---------------------------------------------------------------------------
# Individual parsers
# ---------------------------------------------------------------------------

def parse_integer(text: str, *, line: int | None = None, column: int | None = None) -> VInteger:
    _check(INTEGER_PATTERN, text, "integer", line, column)
    n = int(text)
    if not INT64_MIN <= n <= INT64_MAX:
        raise ValueRangeError(f"integer out of range: {text}", line=line, column=column)
    return VInteger(n)


def parse_float(text: str, *, line: int | None = None, column: int | None = None) -> VFloat:
    _check(FLOAT_PATTERN, text, "float", line, column)
    f = float(text)
    if math.isinf(f):
        raise ValueRangeError(f"float out of range: {text}", line=line, column=column)
    return VFloat(f)


def parse_boolean(text: str, *, line: int | None = None, column: int | None = None) -> VBool:
    _check(BOOLEAN_PATTERN, text, "boolean", line, column)
    return VBool(text == "true")


def parse_datetime(text: str, *, line: int | None = None, column: int | None = None) -> VDateTime:
    """Parse ``YYYY-MM-DDTHH:MM:SSZ`` as an aware UTC datetime."""
    _check(DATETIME_PATTERN, text, "datetime", line, column)
    try:
        dt = datetime.strptime(text, _DATETIME_FORMAT)
    except ValueError:
        raise ValueRangeError(f"datetime out of range: {text}", line=line, column=column) from None
    return VDateTime(dt.replace(tzinfo=timezone.utc))


def parse_string(text: str, *, line: int | None = None, column: int | None = None) -> VString:
    """Parse a double-quoted string literal, quotes included, and unescape it."""
    _check(STRING_PATTERN, text, "string", line, column)
    body_column = None if column is None else column + 1
    return VString(unescape(text[1:-1], line=line, column=body_column))


def unescape(body: str, *, line: int | None = None, column: int | None = None) -> str:
    """Resolve backslash escapes in a string body.

    Only ``\\0 \\t \\n \\r \\" \\\\`` are recognized; anything else is an
    :class:`EscapeSequenceError`.
    """

    def _replace(m: re.Match) -> str:
        ch = m.group(1)
        if ch in _ESCAPES:
            return _ESCAPES[ch]
        col = None if column is None else column + m.start()
        raise EscapeSequenceError(f"invalid escape sequence: {m.group(0)}", line=line, column=col)

    return _ESCAPE_RE.sub(_replace, body)


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScalarRule:
    terminal: str           # grammar terminal name
    kind: ValueKind
    pattern: str
    convert: Callable[..., Value]

    def matches(self, text: str) -> bool:
        return re.fullmatch(self.pattern, text) is not None


SCALAR_RULES: tuple[ScalarRule, ...] = (
    ScalarRule("DATETIME", ValueKind.DateTime, DATETIME_PATTERN, parse_datetime),
    ScalarRule("STRING", ValueKind.String, STRING_PATTERN, parse_string),
    ScalarRule("FLOAT", ValueKind.Float, FLOAT_PATTERN, parse_float),
    ScalarRule("INTEGER", ValueKind.Integer, INTEGER_PATTERN, parse_integer),
    ScalarRule("BOOLEAN", ValueKind.Boolean, BOOLEAN_PATTERN, parse_boolean),
)

RULES_BY_TERMINAL: dict[str, ScalarRule] = {rule.terminal: rule for rule in SCALAR_RULES}


def parse_scalar(text: str, *, line: int | None = None, column: int | None = None) -> Value:
    """Recognize *text* as the first scalar form that matches it in full."""
    for rule in SCALAR_RULES:
        if rule.matches(text):
            return rule.convert(text, line=line, column=column)
    raise TomlParseError(f"unrecognized value: {text!r}", line=line, column=column)
