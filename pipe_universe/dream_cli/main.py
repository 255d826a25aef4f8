#!/usr/bin/env python3
"""
Reduced pipe dreams and the Schubert polynomial of one permutation.

Prints the permutation, every reduced pipe dream ('.' elbow, '+' cross) and
the Schubert polynomial. Parse errors are reported on stderr with exit
status 2 and nothing on stdout.

Usage:
    pipedreams "0,3,2,1"
    pipedreams "0 3 2 1" --delim " " --collect --receipt-dir receipts/
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dream_core.generate import ReducedDreams
from dream_core.perm import PermParseError, parse_perm
from dream_poly.schubert import Schubert

from .utils import build_receipt, save_receipt, setup_logger

DEFAULT_PERM = "0,3,2,1"
DEFAULT_DELIM = ","
EXIT_PARSE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pipedreams",
        description="Reduced pipe dreams and Schubert polynomial of a permutation",
    )
    parser.add_argument(
        "perm",
        nargs="?",
        default=DEFAULT_PERM,
        help=f"Zero-indexed permutation (default: {DEFAULT_PERM!r})",
    )
    parser.add_argument(
        "--delim",
        default=DEFAULT_DELIM,
        help=f"Delimiter between entries (default: {DEFAULT_DELIM!r})",
    )
    parser.add_argument(
        "--collect",
        action="store_true",
        help="Merge equal monomials and print coefficients",
    )
    parser.add_argument(
        "--no-dreams", action="store_true", help="Do not print the dream grids"
    )
    parser.add_argument(
        "--receipt-dir", type=Path, default=None, help="Write a JSON run receipt here"
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Also write logs to this file"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log generation steps (DEBUG)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    # Generation steps are logged by dream_core at DEBUG
    logger = setup_logger("pipedreams", args.log_file, level, shared_with=["dream_core"])

    try:
        perm = parse_perm(args.perm, args.delim)
    except PermParseError as e:
        logger.error(f"{e}")
        return EXIT_PARSE_ERROR

    dreams = ReducedDreams.for_perm(perm)
    schubert = Schubert.from_dreams(dreams)
    logger.info(f"{perm}: length {perm.length()}, {len(dreams)} reduced dreams")

    print(f"Permutation: {perm}")
    if not args.no_dreams:
        print("Reduced dreams:")
        for dream in dreams:
            print(dream.display())
    print(schubert.render(collect=args.collect))

    if args.receipt_dir is not None:
        receipt_file = save_receipt(
            build_receipt(perm, dreams.dreams, schubert), args.receipt_dir
        )
        logger.info(f"Receipt saved to: {receipt_file}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
