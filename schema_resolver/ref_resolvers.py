"""Deferred dereference procedures stored in place of `$ref` values.

A resolver is called with a `ResolutionRoot` and returns the root to continue
with alongside the referenced value. Resolvers hold only the data needed to
navigate again, so they can be invoked any number of times and never expand
their target up front. That is what keeps cyclic schemas finite.
"""

from dataclasses import dataclass
from typing import Any

from schema_resolver.navigate_pointer import navigate_pointer
from schema_resolver.resolution_root import ResolutionRoot


@dataclass(frozen=True)
class RootSchemaResolver:
    """Resolves to the whole document of the root it is given."""

    def __call__(self, root: ResolutionRoot) -> tuple[ResolutionRoot, Any]:
        """Return the root unchanged with its schema."""
        return root, root.schema


@dataclass(frozen=True)
class PointerResolver:
    """Resolves a JSON Pointer inside the document of the root it is given."""

    segments: tuple[str, ...]

    def __call__(self, root: ResolutionRoot) -> tuple[ResolutionRoot, Any]:
        """Navigate `root.schema` along the pointer."""
        return root, navigate_pointer(root.schema, self.segments)


@dataclass(frozen=True)
class RemoteSchemaResolver:
    """Applies an inner resolver to a cached remote document."""

    url: str
    inner: "RootSchemaResolver | PointerResolver"

    def __call__(self, root: ResolutionRoot) -> tuple[ResolutionRoot, Any]:
        """Swap in the cached document for `url`, then apply the inner resolver."""
        return self.inner(root.with_schema(root.refs.get(self.url)))


ReferenceResolver = RootSchemaResolver | PointerResolver | RemoteSchemaResolver
