"""Collapse the source, test and excluded roots of a project listing."""

import argparse
import logging
from pathlib import Path

from root_simplifier.run_simplification import run_simplification


def main(argv: list[str] | None = None) -> int:
    """Run the simplification process."""
    ap = argparse.ArgumentParser(
        description=(
            "Merge nested project folders into the fewest roots that keep "
            "their type and namespace layout."
        ),
    )
    ap.add_argument(
        "listing",
        type=Path,
        help="YAML file with a 'folders' list (path, type, members, ...)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path(),
        help="Directory that folder and member paths are relative to",
    )
    ap.add_argument(
        "--output",
        type=Path,
        help="Write the JSON result here instead of stdout",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log merge decisions",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_simplification(args)


if __name__ == "__main__":
    raise SystemExit(main())
