"""Command-line front end: recover the secret from one or more share files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from ssr.consensus import ConsensusResolver
from ssr.errors import ReconstructionError
from ssr.interpolation import Division
from ssr.loader import load_share_file
from ssr.report import format_report, result_to_dict

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssr-recover",
        description="Recover a Shamir secret by majority vote over all k-subsets "
        "and report shares inconsistent with it.",
    )
    parser.add_argument("files", nargs="+", help="JSON share documents to process")
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="Number of candidate secrets to list (default: 5)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Evaluate subsets in this many processes",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when two candidates tie for the most votes",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Sum Lagrange terms as exact fractions instead of truncating each term",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per file instead of the text report",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run_file(path: str, args: argparse.Namespace) -> str:
    """Load, resolve and render one share file."""
    share_set = load_share_file(path)
    shares = share_set.decode()
    resolver = ConsensusResolver(
        share_set.config.k,
        division=Division.EXACT if args.exact else Division.TRUNCATE,
        workers=args.workers,
        strict=args.strict,
    )
    result = resolver.resolve(shares)

    if args.json:
        payload = {"file": path, **result_to_dict(result, top=args.top)}
        return json.dumps(payload)
    return format_report(result, share_set.config, shares, title=path, top=args.top)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    failures = 0
    for path in args.files:
        try:
            print(run_file(path, args))
        except (OSError, ReconstructionError) as exc:
            logger.error("%s: %s", path, exc)
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
