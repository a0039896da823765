"""Turning a scoped `$ref` string into a reference resolver."""

import logging

from schema_resolver.errors import UnresolvedReferenceError
from schema_resolver.ref_resolvers import (
    PointerResolver,
    ReferenceResolver,
    RemoteSchemaResolver,
    RootSchemaResolver,
)
from schema_resolver.remote_schema_cache import ensure_cached
from schema_resolver.resolution_root import ResolutionRoot
from schema_resolver.resolve_context import ResolveContext
from schema_resolver.unescape_pointer_segments import unescape_pointer_segments

logger = logging.getLogger(__name__)


def resolve_ref(
    root: ResolutionRoot, ref: str, context: ResolveContext
) -> tuple[ResolutionRoot, ReferenceResolver]:
    """Build the resolver for `ref`, fetching its remote document if needed.

    The resolver is probed once against `root` so a dangling reference fails
    here, with the reference named, rather than at validation time.
    """
    if ref == "#":
        return root, RootSchemaResolver()

    url, _, fragment = ref.partition("#")

    resolver: ReferenceResolver
    if fragment.startswith("/"):
        resolver = PointerResolver(tuple(unescape_pointer_segments(fragment)))
    else:
        resolver = RootSchemaResolver()

    if url:
        root = ensure_cached(root, url, context)
        resolver = RemoteSchemaResolver(url, resolver)

    _, target = resolver(root)
    if target is None:
        raise UnresolvedReferenceError(ref)

    logger.debug("Resolved reference %s", ref)
    return root, resolver
