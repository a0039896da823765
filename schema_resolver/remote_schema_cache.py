"""Fetching and memoizing remote schema documents inside a resolution root."""

import logging
from typing import Any

from schema_resolver.errors import RemoteSchemaError
from schema_resolver.meta_schema import draft4_meta_schema
from schema_resolver.resolution_root import ResolutionRoot
from schema_resolver.resolve_context import ResolveContext
from schema_resolver.schema_urls import META_SCHEMA_URLS

logger = logging.getLogger(__name__)


def ensure_cached(
    root: ResolutionRoot, url: str, context: ResolveContext
) -> ResolutionRoot:
    """Return a root whose `refs` holds the resolved document for `url`.

    A url that is already cached is never fetched again. The draft-4
    meta-schema urls are served from the bundled document.
    """
    if url in root.refs:
        logger.debug("Remote schema cache hit: %s", url)
        return root

    if url in META_SCHEMA_URLS:
        document = draft4_meta_schema()
    else:
        document = context.fetch(url)
        if not isinstance(document, dict):
            raise RemoteSchemaError(url, "document is not a JSON object")

    return _resolve_remote_schema(root, url, document, context)


def _resolve_remote_schema(
    root: ResolutionRoot, url: str, document: dict[str, Any], context: ResolveContext
) -> ResolutionRoot:
    """Resolve a freshly fetched document and cache the result under `url`.

    The raw document is cached first so refs back to `url` from inside the
    document see it instead of fetching again.
    """
    from schema_resolver.resolve_schema import resolve_root  # noqa: PLC0415

    provisional = root.with_ref(url, document).with_schema(document)
    resolved = resolve_root(provisional, context)
    logger.info("Cached remote schema %s", url)
    return resolved.with_schema(root.schema).with_ref(url, resolved.schema)
