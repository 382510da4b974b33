"""Orchestration logic for simplifying a folder listing from the command line."""

import argparse
import json
import logging
import sys
from typing import Any

from root_simplifier.build_namespace_resolver import build_namespace_resolver
from root_simplifier.folder import Folder
from root_simplifier.folder_listing import folders_to_records, load_folder_listing
from root_simplifier.load_config import load_config
from root_simplifier.simplify_folders import simplify_folders

logger = logging.getLogger(__name__)


def run_simplification(args: argparse.Namespace) -> int:
    """Execute the full simplification pipeline."""
    if not args.listing.is_file():
        msg = f"Folder listing not found: {args.listing}"
        raise SystemExit(msg)

    config = load_config(args.config)
    try:
        resolver = build_namespace_resolver(config, args.project_root)
        folders = load_folder_listing(args.listing)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    simplified = simplify_folders(folders, resolver)
    logger.info("Reduced %d folders to %d", len(folders), len(simplified))

    report = _build_report(config, len(folders), simplified)
    text = json.dumps(report, indent=2) + "\n"
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote {len(simplified)} folders to: {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def _build_report(
    config: dict[str, Any], input_count: int, simplified: list[Folder]
) -> dict[str, Any]:
    """Assemble the JSON document describing the simplified folders."""
    return {
        "meta": {
            "resolver": config.get("namespace", {}).get("resolver", "prefix"),
            "input_folders": input_count,
            "output_folders": len(simplified),
        },
        "folders": folders_to_records(simplified),
    }
