"""Tracking of the base-URI scope contributed by nested `id` values."""

from typing import Any


def extend_scope(scope: str, node: dict[str, Any]) -> str:
    """Return the scope for `node` and its descendants.

    A string `id` is appended verbatim; authors supply their own `/` or `#`.
    """
    node_id = node.get("id")
    if isinstance(node_id, str):
        return scope + node_id
    return scope


def scoped_ref(scope: str, ref: str) -> str:
    """Make `ref` relative to `scope`, collapsing a doubled fragment marker."""
    return (scope + ref).replace("##", "#")
