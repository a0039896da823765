"""Logic for loading schema documents written as JSON or YAML."""

import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yml", ".yaml")


def parse_schema_text(text: str, name: str) -> Any:
    """Decode schema text, choosing YAML or JSON from the name's suffix."""
    if name.lower().endswith(YAML_SUFFIXES):
        doc = yaml.safe_load(text)
        return {} if doc is None else doc
    return json.loads(text)


def load_schema_document(path: Path) -> Any:
    """Load and decode a schema document from disk."""
    return parse_schema_text(path.read_text(encoding="utf-8"), path.name)
