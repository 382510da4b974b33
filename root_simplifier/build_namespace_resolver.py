"""Logic for constructing the configured namespace resolver."""

import re
from pathlib import Path
from typing import Any

from root_simplifier.namespace_resolver import (
    IdentityNamespaceResolver,
    NamespaceResolver,
)
from root_simplifier.parsing_namespace_resolver import (
    DEFAULT_DECLARATION_PATTERN,
    ParsingNamespaceResolver,
)
from root_simplifier.prefix_namespace_resolver import PrefixNamespaceResolver

RESOLVER_KINDS = ("identity", "prefix", "parsing")


def build_namespace_resolver(
    config: dict[str, Any], project_root: Path
) -> NamespaceResolver:
    """Build the resolver selected by the 'namespace' config section."""
    ns_config = config.get("namespace", {})
    kind = ns_config.get("resolver", "prefix")
    if kind not in RESOLVER_KINDS:
        msg = f"Unknown namespace resolver: {kind!r}"
        raise ValueError(msg)

    if kind == "identity":
        return IdentityNamespaceResolver()

    prefix_resolver = PrefixNamespaceResolver(
        ns_config.get("path_prefixes", []),
        ns_config.get("path_elements", []),
    )
    if kind == "prefix":
        return prefix_resolver

    pattern = ns_config.get("declaration_pattern", DEFAULT_DECLARATION_PATTERN)
    try:
        return ParsingNamespaceResolver(project_root, prefix_resolver, pattern)
    except re.error as e:
        msg = f"Invalid declaration_pattern {pattern!r}: {e}"
        raise ValueError(msg) from e
