"""Reader layer: converts the lark parse tree to a Document."""

from __future__ import annotations

from lark import Token, Transformer, Tree, v_args
from lark.exceptions import VisitError

from .document import Document, KeyGroupPath, KeyValue, Section
from .errors import ArrayTypeError, TomlError
from .scalars import RULES_BY_TERMINAL
from .values import Value, ValueKind, VArray


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def split_key_group(header: str) -> KeyGroupPath:
    """``[servers.alpha]`` → ``("servers", "alpha")``."""
    return tuple(header[1:-1].split("."))


def check_homogeneous(
    items: list[Value],
    *,
    line: int | None = None,
    column: int | None = None,
) -> None:
    """Reject arrays whose non-array elements differ in kind.

    The first scalar element fixes the element kind. Nested arrays count as
    one kind of their own and may sit beside the scalars; their contents were
    already checked when they were read.
    """
    expected: ValueKind | None = None
    for item in items:
        if item.kind is ValueKind.Array:
            continue
        if expected is None:
            expected = item.kind
        elif item.kind is not expected:
            raise ArrayTypeError(
                expected=str(expected), found=str(item.kind), line=line, column=column
            )


# ---------------------------------------------------------------------------
# Transformer
# ---------------------------------------------------------------------------

class DocumentReader(Transformer):
    """Bottom-up conversion of grammar output to Values, KeyValues and Sections.

    Key/values are attached to the most recent key group, or to the root
    when no header has been seen yet.
    """

    def start(self, children: list) -> Document:
        doc = Document()
        current = doc.root_values
        for item in children:
            if isinstance(item, Section):
                doc.sections.append(item)
                current = item.values
            else:
                current.append(item)
        return doc

    def keyvalue(self, children: list) -> KeyValue:
        key, value = children
        return KeyValue(str(key), value, line=key.line)

    def keygroup(self, children: list) -> Section:
        (header,) = children
        return Section(split_key_group(str(header)), line=header.line)

    @v_args(meta=True)
    def array(self, meta, children: list) -> VArray:
        line = getattr(meta, "line", None)
        column = getattr(meta, "column", None)
        check_homogeneous(children, line=line, column=column)
        return VArray(list(children))

    def __default_token__(self, token: Token):
        rule = RULES_BY_TERMINAL.get(token.type)
        if rule is None:
            return token
        return rule.convert(str(token), line=token.line, column=token.column)


def read_document(tree: Tree) -> Document:
    """Run :class:`DocumentReader` over *tree*, surfacing toml_core errors as-is."""
    try:
        return DocumentReader().transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, TomlError):
            raise exc.orig_exc from None
        raise
