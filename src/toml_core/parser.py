"""Public entry points: text, stream or file → ConfigNode."""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import IO

from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken
from loguru import logger

from .builder import build_tree
from .comments import strip_comments
from .document import Document
from .errors import TomlError, TomlParseError
from .grammar import get_parser
from .node import ConfigNode
from .reader import read_document


_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


# ---------------------------------------------------------------------------
# Input handling
# ---------------------------------------------------------------------------

def decode_input(data: bytes) -> str:
    """Decode raw bytes, honouring a UTF-8 or UTF-16 byte-order mark."""
    encoding = "utf-8"
    for bom, candidate in _BOMS:
        if data.startswith(bom):
            encoding = candidate
            break
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise TomlParseError(f"unparseable input: not valid {encoding}") from exc


def _as_text(source: str | bytes) -> str:
    text = decode_input(source) if isinstance(source, bytes) else source
    return text[1:] if text.startswith("\ufeff") else text


# ---------------------------------------------------------------------------
# Grammar stage
# ---------------------------------------------------------------------------

def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedCharacters):
        return f"unexpected character {exc.char!r}"
    if isinstance(exc, UnexpectedEOF):
        return "unexpected end of input"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "unexpected end of input"
        return f"unexpected token {str(exc.token)!r}"
    return "unparseable input"


def _end_position(text: str) -> tuple[int, int]:
    """1-based line and column just past the last character of *text*."""
    last_break = text.rfind("\n")
    return text.count("\n") + 1, len(text) - last_break


def _position(exc: UnexpectedInput, text: str) -> tuple[int | None, int | None]:
    at_end = isinstance(exc, UnexpectedEOF) or (
        isinstance(exc, UnexpectedToken) and exc.token.type == "$END"
    )
    if at_end:
        return _end_position(text)
    line = exc.line if exc.line and exc.line > 0 else None
    column = exc.column if exc.column and exc.column > 0 else None
    return line, column


def parse_document(source: str | bytes) -> Document:
    """Run comment stripping and the grammar; no tree is built."""
    text = _as_text(source)
    logger.debug("parsing {} characters", len(text))
    stripped = strip_comments(text)
    try:
        tree = get_parser().parse(stripped)
    except UnexpectedInput as exc:
        line, column = _position(exc, stripped)
        logger.debug("grammar failure at line {} column {}", line, column)
        raise TomlParseError(_describe(exc), line=line, column=column) from exc

    document = read_document(tree)
    logger.debug(
        "read {} root values and {} sections",
        len(document.root_values),
        len(document.sections),
    )
    return document


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def loads(source: str | bytes) -> ConfigNode:
    """Parse TOML text into a ConfigNode."""
    try:
        document = parse_document(source)
        root = build_tree(document)
    except TomlError as exc:
        logger.debug("parse failed: {}: {}", type(exc).__name__, exc)
        raise
    logger.debug("built tree with {} values", root.count_values())
    return root


def load(fp: IO) -> ConfigNode:
    """Parse the full contents of a text or binary stream."""
    return loads(fp.read())


def load_path(path: str | os.PathLike, encoding: str | None = None) -> ConfigNode:
    """Parse a file. Without *encoding* the byte-order mark decides (UTF-8 default)."""
    p = Path(path)
    if encoding is None:
        return loads(p.read_bytes())
    return loads(p.read_text(encoding=encoding))
