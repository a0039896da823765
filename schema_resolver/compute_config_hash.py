"""Logic for computing stable hashes of resolver configuration."""

import hashlib
import json
from typing import Any


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the configuration for reports.

    Uses canonical JSON serialization (sorted keys). Only the names of
    `fetch.headers` are hashed; their values may hold credentials.
    """
    fetch = config.get("fetch")
    if isinstance(fetch, dict) and fetch.get("headers"):
        config = {**config, "fetch": {**fetch, "headers": sorted(fetch["headers"])}}
    config_json = json.dumps(config, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
