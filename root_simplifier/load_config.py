"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from root_simplifier.deep_merge import deep_merge
from root_simplifier.parsing_namespace_resolver import DEFAULT_DECLARATION_PATTERN

DEFAULT_CONFIG: dict[str, Any] = {
    "namespace": {
        "resolver": "prefix",
        "path_prefixes": [],
        "path_elements": [
            "src",
            "java",
            "javatests",
            "test",
        ],
        "declaration_pattern": DEFAULT_DECLARATION_PATTERN,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
