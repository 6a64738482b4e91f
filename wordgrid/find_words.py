#!/usr/bin/env python
"""Find all the dictionary words on a board and print them.

$ python -m wordgrid.find_words -t 2 2 abcd < words.txt
"""

import argparse
import logging

from wordgrid.args import (
    add_standard_args,
    get_board_from_args,
    get_searcher_from_args,
    get_trie_from_args,
    setup_logging,
)
from wordgrid.report import ReportMode, format_report

logger = logging.getLogger("wordgrid")


def main():
    parser = argparse.ArgumentParser(
        prog="find_words",
        description="List every dictionary word that can be traced on a board "
        "of adjacent cells, with the number of paths that spell it.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "-c",
        "--not_found",
        action="store_true",
        help="Instead, list the dictionary words that can't be found on the board.",
    )
    parser.add_argument(
        "--include_rejected",
        action="store_true",
        help="With -c, also list input words rejected by the dictionary filter.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar over starting cells.",
    )
    parser.add_argument("rows", type=int, help="Number of board rows.")
    parser.add_argument("cols", type=int, help="Number of board columns.")
    parser.add_argument(
        "letters",
        type=str,
        help="Board letters in row-major order. Use _ for a wildcard cell.",
    )
    args = parser.parse_args()
    if args.include_rejected and not args.not_found:
        parser.error("--include_rejected only applies with -c/--not_found")
    setup_logging(args)

    board = get_board_from_args(parser, args)
    t, rejected = get_trie_from_args(args)
    logger.info("Loaded %d words (%d rejected)", t.size(), len(rejected))

    searcher = get_searcher_from_args(args, t, board)
    searcher.search(progress=args.progress)

    mode = ReportMode.NOT_FOUND if args.not_found else ReportMode.FOUND
    for line in format_report(t, mode, rejected if args.include_rejected else None):
        print(line)


if __name__ == "__main__":
    main()
