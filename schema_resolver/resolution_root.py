"""Data model for the value threaded through a resolution."""

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ResolutionRoot:
    """The document being resolved plus the cache of resolved remote documents.

    Instances are never mutated; every step returns a new root.
    """

    schema: Any
    refs: dict[str, Any] = field(default_factory=dict)  # absolute url -> document

    def with_schema(self, schema: Any) -> "ResolutionRoot":
        """Return a copy whose `schema` is replaced."""
        return replace(self, schema=schema)

    def with_ref(self, url: str, document: Any) -> "ResolutionRoot":
        """Return a copy with `url` cached as `document`."""
        return replace(self, refs={**self.refs, url: document})
