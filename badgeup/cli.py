"""CLI entrypoint for badgeup."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import BadgeupError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="badgeup",
        description="Insert crate badges under the first heading of a project's README.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the crate root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a debug log to this file.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the README diff without writing it.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for badgeup."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(1, f"badgeup: cannot open log file {args.log_file}: {exc}\n")

    orchestrator = Orchestrator()
    try:
        outcome = orchestrator.run(args.path, dry_run=bool(args.dry_run))
    except BadgeupError as exc:
        parser.exit(1, f"badgeup: {exc}\n")

    if outcome.dry_run:
        print(outcome.diff or "(no diff)", end="" if outcome.diff else "\n")


if __name__ == "__main__":
    main(sys.argv[1:])
