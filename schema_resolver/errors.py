"""Exceptions raised while resolving a schema document."""

from typing import Any


class SchemaResolverError(Exception):
    """Base class for every error raised by the resolver."""


class UnsupportedSchemaVersionError(SchemaResolverError):
    """The `$schema` value is not draft-4 or the current alias."""

    def __init__(self, version: str) -> None:
        """Record the rejected version string."""
        self.version = version
        super().__init__(
            f"unsupported schema version {version!r}, only draft 4 is supported"
        )


class InvalidSchemaError(SchemaResolverError):
    """The document is not a valid draft-4 schema."""

    def __init__(
        self, message: str = "invalid schema", errors: list[Any] | None = None
    ) -> None:
        """Store the message and the structured validation errors, if any."""
        self.errors = errors or []
        super().__init__(message)


class UnresolvedReferenceError(InvalidSchemaError):
    """A `$ref` points at nothing."""

    def __init__(self, ref: str) -> None:
        """Record the offending reference string."""
        self.ref = ref
        super().__init__(f"reference {ref} could not be resolved")


class RemoteSchemaError(SchemaResolverError):
    """A remote schema URL could not be turned into a schema document."""

    def __init__(self, url: str, reason: str) -> None:
        """Record the URL and why it was refused."""
        self.url = url
        self.reason = reason
        super().__init__(f"cannot load remote schema {url}: {reason}")
