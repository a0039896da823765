"""Canonical draft-4 URLs and the predicates built on them."""

from typing import Any

CURRENT_DRAFT_SCHEMA_URL = "http://json-schema.org/schema"
DRAFT4_SCHEMA_URL = "http://json-schema.org/draft-04/schema"

META_SCHEMA_URLS = frozenset({CURRENT_DRAFT_SCHEMA_URL, DRAFT4_SCHEMA_URL})


def is_supported_schema_version(version: str) -> bool:
    """Check if a `$schema` value names draft-4 or the current alias."""
    return version.startswith((CURRENT_DRAFT_SCHEMA_URL, DRAFT4_SCHEMA_URL))


def is_meta_schema(schema: dict[str, Any]) -> bool:
    """Check if the document is the draft-4 meta-schema itself."""
    schema_id = schema.get("id", "")
    return isinstance(schema_id, str) and schema_id.startswith(DRAFT4_SCHEMA_URL)
