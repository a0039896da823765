"""Logic for loading and merging resolver configuration files."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from schema_resolver.deep_merge import deep_merge

CONFIG_ENV_VAR = "SCHEMA_RESOLVER_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "fetch": {
        "timeout": 10.0,
        "allowed_schemes": ["file", "http", "https"],
        "headers": {},
        "mirrors": {},
    },
    "validation": {
        "meta_validate": True,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Without an explicit `path`, the `SCHEMA_RESOLVER_CONFIG` environment
    variable is consulted. A missing file leaves the defaults untouched.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
