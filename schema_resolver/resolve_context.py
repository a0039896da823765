"""The external collaborators a resolution is run with."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from schema_resolver.errors import RemoteSchemaError
from schema_resolver.fetch_remote_schema import RemoteSchemaFetcher
from schema_resolver.load_config import load_config
from schema_resolver.resolution_root import ResolutionRoot
from schema_resolver.validate_against_meta_schema import (
    validate_against_meta_schema,
)

Fetcher = Callable[[str], Any]
MetaValidator = Callable[[ResolutionRoot, dict[str, Any]], list[Any]]


def refuse_fetch(url: str) -> Any:
    """Fetcher used when no remote access has been configured."""
    raise RemoteSchemaError(url, "no remote schema fetcher is configured")


@dataclass(frozen=True)
class ResolveContext:
    """Collaborators shared by a top-level resolution and its nested fetches."""

    fetch: Fetcher = refuse_fetch
    validate: MetaValidator = validate_against_meta_schema
    meta_validate: bool = True

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ResolveContext":
        """Build a context from a loaded configuration dictionary."""
        return cls(
            fetch=RemoteSchemaFetcher(config["fetch"]),
            meta_validate=bool(config["validation"].get("meta_validate", True)),
        )


def default_context() -> ResolveContext:
    """Build the process-wide context from the configuration file, if any."""
    return ResolveContext.from_config(load_config())
