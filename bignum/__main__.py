"""
Interactive calculator over stdin/stdout.

Usage:
    python -m bignum                      # run the session
    python -m bignum --log-level DEBUG    # also log every evaluation to stderr
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from bignum.calculator import EXIT_SENTINEL, SessionConfig, run_session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum",
        description="Add and subtract arbitrary-precision decimal integers.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics written to stderr (default: WARNING)",
    )
    parser.add_argument(
        "--exit-sentinel",
        default=EXIT_SENTINEL,
        help=f"Line that ends the session (default: {EXIT_SENTINEL!r})",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    run_session(sys.stdin, sys.stdout, SessionConfig(exit_sentinel=args.exit_sentinel))
    return 0


if __name__ == "__main__":
    sys.exit(main())
