"""Tests for draft-4 default filling."""

import pytest

from schema_resolver.normalize_schema_node import normalize_schema_node


@pytest.mark.parametrize(
    "node",
    [
        {},
        {"patternProperties": {"^a": {}}},
        {"additionalProperties": False},
        {"items": {}},
        {"items": [{}], "additionalItems": False},
        {"properties": {"a": {}}, "patternProperties": {}},
    ],
)
def test_normalize_is_idempotent(node: dict) -> None:
    """Verify that normalizing twice equals normalizing once."""
    once = normalize_schema_node(node)
    assert normalize_schema_node(once) == once


def test_pattern_and_additional_properties_gain_properties() -> None:
    """Verify that `properties: {}` is inserted when missing."""
    assert normalize_schema_node({"patternProperties": {"^a": {}}}) == {
        "patternProperties": {"^a": {}},
        "properties": {},
    }
    assert normalize_schema_node({"additionalProperties": True}) == {
        "additionalProperties": True,
        "properties": {},
    }


def test_items_gain_additional_items() -> None:
    """Verify that `additionalItems: True` is inserted when missing."""
    assert normalize_schema_node({"items": {}}) == {
        "items": {},
        "additionalItems": True,
    }


def test_explicit_values_are_untouched() -> None:
    """Verify that explicit `properties` and `additionalItems` are kept."""
    node = {
        "properties": {"a": {"type": "string"}},
        "additionalProperties": False,
        "items": [{}],
        "additionalItems": False,
    }
    assert normalize_schema_node(node) == node


def test_input_is_not_mutated() -> None:
    """Verify that the Normalizer returns a new mapping."""
    node = {"items": {}}
    normalize_schema_node(node)
    assert node == {"items": {}}
