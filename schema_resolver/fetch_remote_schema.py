"""Default collaborator for turning a remote schema URL into a document."""

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit
from urllib.request import url2pathname

import httpx

from schema_resolver.errors import RemoteSchemaError
from schema_resolver.load_schema_document import (
    load_schema_document,
    parse_schema_text,
)

logger = logging.getLogger(__name__)


class RemoteSchemaFetcher:
    """Fetches raw schema documents over HTTP(S), `file://` URLs or local mirrors."""

    def __init__(
        self, fetch_config: dict[str, Any], client: httpx.Client | None = None
    ) -> None:
        """Initialize from the `fetch` section of the configuration.

        An explicit `client` is used as-is (and left open); otherwise a
        short-lived client is created for every HTTP request.
        """
        self.timeout = float(fetch_config.get("timeout", 10.0))
        self.allowed_schemes = set(fetch_config.get("allowed_schemes", []))
        self.headers: dict[str, str] = dict(fetch_config.get("headers") or {})
        # url prefix -> local directory
        self.mirrors: dict[str, str] = dict(fetch_config.get("mirrors") or {})
        self.client = client

    def __call__(self, url: str) -> dict[str, Any]:
        """Fetch `url` and return the decoded schema document."""
        document = self._fetch(url)
        if not isinstance(document, dict):
            raise RemoteSchemaError(url, "document is not a JSON object")
        return document

    def _fetch(self, url: str) -> Any:
        mirrored = self._mirror_path(url)
        if mirrored is not None:
            logger.debug("Loading %s from mirror %s", url, mirrored)
            return load_schema_document(mirrored)

        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        if scheme not in self.allowed_schemes:
            raise RemoteSchemaError(url, f"scheme {scheme!r} is not allowed")

        if scheme == "file":
            return load_schema_document(Path(url2pathname(parts.path)))

        logger.info("Fetching remote schema %s", url)
        if self.client is not None:
            return self._get(self.client, url)
        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            return self._get(client, url)

    def _get(self, client: httpx.Client, url: str) -> Any:
        response = client.get(url, headers=self.headers)
        response.raise_for_status()
        return parse_schema_text(response.text, urlsplit(url).path)

    def _mirror_path(self, url: str) -> Path | None:
        """Map `url` onto a local file when a configured mirror prefix matches."""
        # Longest prefix wins so nested mirrors can override broad ones.
        for prefix in sorted(self.mirrors, key=len, reverse=True):
            if url.startswith(prefix):
                mirror_root = Path(self.mirrors[prefix]).resolve()
                path = (mirror_root / url[len(prefix) :]).resolve()
                if not path.is_relative_to(mirror_root):
                    raise RemoteSchemaError(url, "path escapes the mirror directory")
                return path
        return None
