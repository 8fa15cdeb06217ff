"""
Command-line interface for declselect.

Loads a declaration tree document, runs one selection against it and prints
the outcome as YAML.

Exit codes:
    0: selection succeeded
    1: the path was malformed or could not be resolved
    2: the tree document or settings could not be used
"""

import argparse
import dataclasses
import logging
import sys

from declselect.config import SelectorSettings
from declselect.exceptions import SelectionError, SettingsError, TreeDocumentError
from declselect.loading import dump_outcome, load_tree
from declselect.selection import select

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="declselect",
        description="Select declarations from a declaration tree by path.",
    )
    p.add_argument("path", help="Path to select, e.g. a::b::C::d")
    p.add_argument("tree", help="YAML or JSON declaration tree document")
    p.add_argument(
        "--separator",
        default=None,
        help="Segment separator (default: '::', or the value from --config)",
    )
    p.add_argument(
        "--config",
        default=None,
        help="YAML file with selector settings",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each descent step",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    try:
        if args.config:
            settings = SelectorSettings.from_yaml(args.config)
        else:
            settings = SelectorSettings()
        if args.separator is not None:
            settings = dataclasses.replace(settings, separator=args.separator)
        root = load_tree(args.tree)
    except (SettingsError, TreeDocumentError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        outcome = select(args.path, root, settings)
    except SelectionError as e:
        logger.debug("Selection of '%s' failed", args.path, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(dump_outcome(outcome))
    return 0


if __name__ == "__main__":
    sys.exit(main())
