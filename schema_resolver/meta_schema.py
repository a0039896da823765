"""Access to the bundled draft-4 meta-schema document."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

DRAFT4_META_SCHEMA_PATH = Path(__file__).with_name("draft4.json")


@lru_cache(maxsize=1)
def _draft4_text() -> str:
    return DRAFT4_META_SCHEMA_PATH.read_text(encoding="utf-8")


def draft4_meta_schema() -> dict[str, Any]:
    """Return a fresh copy of the raw draft-4 meta-schema."""
    return json.loads(_draft4_text())
