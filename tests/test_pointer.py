"""Tests for JSON-Pointer parsing and navigation."""

from schema_resolver.navigate_pointer import navigate_pointer
from schema_resolver.unescape_pointer_segments import unescape_pointer_segments


def test_unescape_plain_segments() -> None:
    """Verify that a simple pointer splits into keys."""
    assert unescape_pointer_segments("/definitions/a") == ["definitions", "a"]


def test_unescape_tilde_escapes() -> None:
    """Verify `~0` and `~1` decoding, including the `~01` edge case."""
    assert unescape_pointer_segments("/~0~1") == ["~/"]
    assert unescape_pointer_segments("/a~1b") == ["a/b"]
    assert unescape_pointer_segments("/~01") == ["~1"]


def test_unescape_percent_encoding() -> None:
    """Verify that segments are percent-decoded."""
    assert unescape_pointer_segments("/a%20b/c%25d") == ["a b", "c%d"]


def test_unescape_keeps_numeric_segments_as_text() -> None:
    """Verify that decimal segments keep their exact text."""
    assert unescape_pointer_segments("/items/0/12") == ["items", "0", "12"]
    assert unescape_pointer_segments("/01") == ["01"]


def test_unescape_empty_pointer() -> None:
    """Verify the degenerate pointers."""
    assert unescape_pointer_segments("") == []
    assert unescape_pointer_segments("/") == [""]


def test_navigate_through_objects_and_lists() -> None:
    """Verify navigation by keys and indices."""
    doc = {"items": [{"type": "string"}, {"type": "integer"}]}
    assert navigate_pointer(doc, ["items", "1"]) == {"type": "integer"}
    assert navigate_pointer(doc, []) is doc


def test_navigate_missing_paths_yield_none() -> None:
    """Verify that missing keys, bad indices and scalars yield None."""
    doc = {"items": [{"type": "string"}], "title": "x"}
    assert navigate_pointer(doc, ["nope"]) is None
    assert navigate_pointer(doc, ["items", "5"]) is None
    assert navigate_pointer(doc, ["items", "first"]) is None
    assert navigate_pointer(doc, ["title", "more"]) is None


def test_navigate_numeric_segment_on_object() -> None:
    """Verify that a decimal segment on an object is looked up as a key."""
    doc = {"properties": {"0": {"type": "null"}}}
    assert navigate_pointer(doc, ["properties", "0"]) == {"type": "null"}


def test_navigate_keys_that_look_like_indices() -> None:
    """Verify leading zeros and non-ASCII digits are kept as literal keys."""
    doc = {"definitions": {"01": {"type": "string"}, "1": {"type": "null"}}}
    assert navigate_pointer(doc, ["definitions", "01"]) == {"type": "string"}
    assert navigate_pointer({"١": {"type": "null"}}, ["١"]) == {"type": "null"}
    assert navigate_pointer({"1": {}}, ["١"]) is None


def test_navigate_list_requires_ascii_index() -> None:
    """Verify that only ASCII decimal segments index into lists."""
    doc = ["a", "b"]
    assert navigate_pointer(doc, ["01"]) == "b"
    assert navigate_pointer(doc, ["١"]) is None
    assert navigate_pointer(doc, ["-1"]) is None
