"""Entry point: resolve a raw draft-4 schema into a resolution root."""

import copy
import logging
from functools import lru_cache
from typing import Any

from schema_resolver.errors import (
    InvalidSchemaError,
    UnsupportedSchemaVersionError,
)
from schema_resolver.meta_schema import draft4_meta_schema
from schema_resolver.resolution_root import ResolutionRoot
from schema_resolver.resolve_context import ResolveContext, default_context
from schema_resolver.resolve_ref import resolve_ref
from schema_resolver.schema_urls import (
    CURRENT_DRAFT_SCHEMA_URL,
    is_meta_schema,
    is_supported_schema_version,
)
from schema_resolver.walk_schema import walk_schema

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_VERSION = CURRENT_DRAFT_SCHEMA_URL + "#"


def resolve(schema: Any, context: ResolveContext | None = None) -> Any:
    """Resolve a schema document or root; any other value is returned as-is."""
    if isinstance(schema, ResolutionRoot):
        return resolve_root(schema, context or default_context())
    if isinstance(schema, dict):
        return resolve_root(ResolutionRoot(schema), context or default_context())
    return schema


def resolve_root(root: ResolutionRoot, context: ResolveContext) -> ResolutionRoot:
    """Check, validate and walk `root.schema`, returning the resolved root."""
    document = root.schema
    if not isinstance(document, dict):
        raise InvalidSchemaError("schema document must be a JSON object")

    version = document.get("$schema", DEFAULT_SCHEMA_VERSION)
    if not isinstance(version, str) or not is_supported_schema_version(version):
        raise UnsupportedSchemaVersionError(str(version))

    if context.meta_validate and not is_meta_schema(document):
        _assert_valid_schema(document, context)

    root, schema = walk_schema(root, document, "", context)
    logger.debug("Resolved schema with %d cached remote documents", len(root.refs))
    return root.with_schema(schema)


def lookup_fragment(
    root: ResolutionRoot, ref: str, context: ResolveContext | None = None
) -> tuple[ResolutionRoot, Any]:
    """Dereference `ref` against an already resolved root.

    Returns the root to continue with (inside the remote document for
    url refs) and the referenced value.
    """
    root, resolver = resolve_ref(root, ref, context or default_context())
    return resolver(root)


def resolved_meta_schema() -> ResolutionRoot:
    """Return a private copy of the resolved draft-4 meta-schema.

    The meta-schema is resolved once per process; callers may mutate the copy.
    """
    return copy.deepcopy(_resolved_meta_schema())


@lru_cache(maxsize=1)
def _resolved_meta_schema() -> ResolutionRoot:
    return resolve_root(ResolutionRoot(draft4_meta_schema()), ResolveContext())


def _assert_valid_schema(document: dict[str, Any], context: ResolveContext) -> None:
    errors = context.validate(resolved_meta_schema(), document)
    if errors:
        msg = f"schema did not pass validation against its meta-schema: {errors!r}"
        raise InvalidSchemaError(msg, errors)
