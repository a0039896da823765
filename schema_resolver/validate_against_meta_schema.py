"""Default collaborator for checking a document against the draft-4 meta-schema."""

from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from jsonschema import Draft4Validator

from schema_resolver.meta_schema import draft4_meta_schema
from schema_resolver.resolution_root import ResolutionRoot


@lru_cache(maxsize=1)
def draft4_validator() -> Draft4Validator:
    """Return the `jsonschema` validator for the bundled meta-schema."""
    return Draft4Validator(draft4_meta_schema())


def validate_against_meta_schema(
    meta_root: ResolutionRoot, document: dict[str, Any]
) -> list[dict[str, str]]:
    """Validate `document` as a draft-4 schema and return its errors.

    `jsonschema` follows `$ref` on its own, so it is driven by the raw
    meta-schema rather than by `meta_root`, whose `$ref` values are resolver
    objects. An empty list means the document is valid.
    """
    errors = sorted(
        draft4_validator().iter_errors(document),
        key=lambda e: [str(p) for p in e.path],
    )
    return [
        {"path": _json_pointer(error.absolute_path), "message": error.message}
        for error in errors
    ]


def _json_pointer(path: Iterable[Any]) -> str:
    pointer = "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in path
    )
    return pointer or "/"
