"""Logic for summarizing a finished resolution as a JSON report."""

import json
import time
from collections import Counter
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from schema_resolver.ref_resolvers import (
    PointerResolver,
    ReferenceResolver,
    RemoteSchemaResolver,
    RootSchemaResolver,
)
from schema_resolver.resolution_root import ResolutionRoot

RESOLVER_TYPES = (RootSchemaResolver, PointerResolver, RemoteSchemaResolver)


def iter_ref_resolvers(node: Any) -> Iterator[ReferenceResolver]:
    """Yield every reference resolver embedded in a resolved schema."""
    if isinstance(node, RESOLVER_TYPES):
        yield node
    elif isinstance(node, dict):
        for value in node.values():
            yield from iter_ref_resolvers(value)
    elif isinstance(node, list):
        for value in node:
            yield from iter_ref_resolvers(value)


def resolver_kind(resolver: ReferenceResolver) -> str:
    """Classify a resolver as `root`, `pointer`, or `remote`."""
    if isinstance(resolver, RemoteSchemaResolver):
        return "remote"
    if isinstance(resolver, PointerResolver):
        return "pointer"
    return "root"


class ResolutionReport:
    """Collects and summarizes what a resolution produced."""

    def __init__(self, config_hash: str, source: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.source = source
        self.start_time = time.time()

    def build(self, root: ResolutionRoot) -> dict[str, Any]:
        """Summarize the resolved root."""
        kinds = Counter(resolver_kind(r) for r in iter_ref_resolvers(root.schema))
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "source": self.source,
            },
            "remote_documents": sorted(root.refs),
            "references": {
                "total": sum(kinds.values()),
                "by_kind": dict(sorted(kinds.items())),
            },
        }

    def generate_report(self, path: Path, root: ResolutionRoot) -> None:
        """Write the summary report to a JSON file."""
        path.write_text(json.dumps(self.build(root), indent=2), encoding="utf-8")
