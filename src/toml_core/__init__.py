"""toml_core: grammar engine and config tree for a TOML dialect."""

from loguru import logger

from .builder import build_tree
from .comments import strip_comments
from .document import Document, KeyValue, Section
from .errors import (
    ArrayTypeError,
    ConfigAccessError,
    DuplicateKeyError,
    EscapeSequenceError,
    KeyGroupConflictError,
    MissingKeyError,
    TomlError,
    TomlParseError,
    TomlStructureError,
    ValueRangeError,
    ValueTypeError,
)
from .node import ConfigNode
from .parser import load, load_path, loads, parse_document
from .values import (
    Value,
    ValueKind,
    VArray,
    VBool,
    VDateTime,
    VFloat,
    VInteger,
    VString,
)

# Library default: silent until the application calls logger.enable("toml_core")
logger.disable(__name__)

__all__ = [
    "loads",
    "load",
    "load_path",
    "parse_document",
    "build_tree",
    "strip_comments",
    "ConfigNode",
    "Document",
    "KeyValue",
    "Section",
    "Value",
    "ValueKind",
    "VArray",
    "VBool",
    "VDateTime",
    "VFloat",
    "VInteger",
    "VString",
    "TomlError",
    "TomlParseError",
    "ValueRangeError",
    "EscapeSequenceError",
    "ArrayTypeError",
    "TomlStructureError",
    "DuplicateKeyError",
    "KeyGroupConflictError",
    "ConfigAccessError",
    "MissingKeyError",
    "ValueTypeError",
]
