"""Depth-first traversal that swaps every `$ref` for a reference resolver."""

from typing import Any

from schema_resolver.extend_scope import extend_scope, scoped_ref
from schema_resolver.normalize_schema_node import normalize_schema_node
from schema_resolver.resolution_root import ResolutionRoot
from schema_resolver.resolve_context import ResolveContext
from schema_resolver.resolve_ref import resolve_ref


def walk_schema(
    root: ResolutionRoot, node: Any, scope: str, context: ResolveContext
) -> tuple[ResolutionRoot, Any]:
    """Resolve `node` under `scope`, threading `root` through every step."""
    if isinstance(node, dict):
        return _walk_object(root, node, extend_scope(scope, node), context)
    if isinstance(node, list):
        return _walk_list(root, node, scope, context)
    return root, node


def _walk_object(
    root: ResolutionRoot, node: dict[str, Any], scope: str, context: ResolveContext
) -> tuple[ResolutionRoot, dict[str, Any]]:
    resolved: dict[str, Any] = {}
    for key, value in node.items():
        root, resolved[key] = _walk_property(root, key, value, scope, context)
    return root, normalize_schema_node(resolved)


def _walk_list(
    root: ResolutionRoot, values: list[Any], scope: str, context: ResolveContext
) -> tuple[ResolutionRoot, list[Any]]:
    resolved = []
    for value in values:
        root, item = walk_schema(root, value, scope, context)
        resolved.append(item)
    return root, resolved


def _walk_property(
    root: ResolutionRoot, key: str, value: Any, scope: str, context: ResolveContext
) -> tuple[ResolutionRoot, Any]:
    if isinstance(value, (dict, list)):
        return walk_schema(root, value, scope, context)
    if key == "$ref" and isinstance(value, str):
        return resolve_ref(root, scoped_ref(scope, value), context)
    return root, value
