"""Parsing of JSON-Pointer fragments into path segments."""

import re
from urllib.parse import unquote

_ESCAPE = re.compile(r"~[01]")
_ESCAPES = {"~0": "~", "~1": "/"}


def unescape_pointer_segments(fragment: str) -> list[str]:
    """Split a `/a/b~1c/0` fragment into unescaped segments.

    `~0` and `~1` are decoded in one pass, so `~01` becomes the literal `~1`.
    Segments stay strings; list indices are parsed during navigation.
    """
    _, *raw_segments = fragment.split("/")
    return [
        unquote(_ESCAPE.sub(lambda m: _ESCAPES[m.group(0)], raw))
        for raw in raw_segments
    ]
