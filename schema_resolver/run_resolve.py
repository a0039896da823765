"""Orchestration logic for resolving a schema file from the command line."""

import argparse
import json
import logging
from typing import Any

from schema_resolver.compute_config_hash import compute_config_hash
from schema_resolver.errors import SchemaResolverError
from schema_resolver.load_config import load_config
from schema_resolver.load_schema_document import load_schema_document
from schema_resolver.resolution_report import ResolutionReport, iter_ref_resolvers
from schema_resolver.resolve_context import ResolveContext
from schema_resolver.resolve_schema import lookup_fragment, resolve

logger = logging.getLogger(__name__)


def run_resolve(args: argparse.Namespace) -> int:
    """Resolve `args.schema` and print or report the outcome."""
    config = load_config(args.config)
    _configure_logging(config, verbose=args.verbose)

    context = ResolveContext.from_config(config)
    report = ResolutionReport(compute_config_hash(config), str(args.schema))
    document = load_schema_document(args.schema)
    if not isinstance(document, dict):
        logger.error("Schema %s is not a JSON object", args.schema)
        return 1

    try:
        root = resolve(document, context)
        for ref in args.ref:
            _, value = lookup_fragment(root, ref, context)
            # Nested refs print as their resolver repr.
            print(json.dumps(value, indent=2, sort_keys=True, default=repr))
    except SchemaResolverError as exc:
        logger.error("Failed to resolve %s: %s", args.schema, exc)
        return 1

    if args.report:
        report.generate_report(args.report, root)

    ref_count = sum(1 for _ in iter_ref_resolvers(root.schema))
    print(
        f"Resolved {args.schema}: {ref_count} references, "
        f"{len(root.refs)} remote documents"
    )
    return 0


def _configure_logging(config: dict[str, Any], *, verbose: bool) -> None:
    level = "DEBUG" if verbose else str(config["logging"].get("level", "INFO"))
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
