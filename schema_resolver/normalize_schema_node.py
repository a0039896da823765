"""Draft-4 default filling for resolved schema objects."""

from typing import Any


def normalize_schema_node(node: dict[str, Any]) -> dict[str, Any]:
    """Return `node` with implicit `properties` and `additionalItems` made explicit.

    - `patternProperties` or `additionalProperties` without `properties`
      gains `properties: {}`.
    - `items` without `additionalItems` gains `additionalItems: True`.
    """
    result = dict(node)
    if "properties" not in result and (
        "patternProperties" in result or "additionalProperties" in result
    ):
        result["properties"] = {}
    if "items" in result and "additionalItems" not in result:
        result["additionalItems"] = True
    return result
