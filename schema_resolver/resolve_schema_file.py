"""Command-line interface for resolving a draft-4 schema file."""

import argparse
from pathlib import Path

from schema_resolver.run_resolve import run_resolve


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the resolver CLI."""
    ap = argparse.ArgumentParser(
        description=(
            "Resolve a draft-4 JSON Schema: check its version, validate it "
            "against the meta-schema and bind every $ref."
        ),
    )
    ap.add_argument(
        "schema",
        type=Path,
        help="Schema document (.json, .yml or .yaml)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--ref",
        action="append",
        default=[],
        help="Dereference REF against the resolved schema and print it (repeatable)",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON resolution report to this path",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the resolver CLI."""
    args = build_parser().parse_args(argv)
    return run_resolve(args)


if __name__ == "__main__":
    raise SystemExit(main())
