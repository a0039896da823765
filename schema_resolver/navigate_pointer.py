"""Walking a document along decoded JSON-Pointer segments."""

import re
from collections.abc import Sequence
from typing import Any

_INDEX = re.compile(r"[0-9]+")


def navigate_pointer(document: Any, segments: Sequence[str]) -> Any:
    """Return the value at `segments` inside `document`, or None if absent.

    On a list a segment must be an ASCII decimal index; on an object it is
    always the literal key.
    """
    current = document
    for segment in segments:
        if isinstance(current, list):
            if not _INDEX.fullmatch(segment) or int(segment) >= len(current):
                return None
            current = current[int(segment)]
        elif isinstance(current, dict):
            current = current.get(segment)
        else:
            return None
    return current
