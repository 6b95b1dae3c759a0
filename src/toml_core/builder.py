"""Tree builder: Document → ConfigNode."""

from __future__ import annotations

from .document import Document, KeyGroupPath, KeyValue, format_path
from .errors import ROOT_PATH
from .node import ConfigNode


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build_tree(document: Document) -> ConfigNode:
    """Materialize *document* as a nested ConfigNode.

    Root values go in first, then each section in source order. A key group
    that appears more than once is merged into the same node. Duplicate keys
    and keys reused as key groups raise at the point of insertion.
    """
    root = ConfigNode()
    load_values(root, document.root_values, ROOT_PATH)

    for section in document.sections:
        group = resolve_key_group(root, section.path)
        load_values(group, section.values, format_path(section.path))

    return root


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def resolve_key_group(root: ConfigNode, path: KeyGroupPath) -> ConfigNode:
    """Walk *path* from *root*, creating intermediate nodes as needed."""
    current = root
    for depth, part in enumerate(path):
        current = current.child(part, path=format_path(path[:depth]))
    return current


def load_values(node: ConfigNode, values: list[KeyValue], path: str) -> None:
    for kv in values:
        node.insert(kv.key, kv.value, path=path)
