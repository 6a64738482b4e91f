"""Standard command-line arguments shared across tools."""

import argparse
import fileinput
import logging

from wordgrid.board import Board, ConfigError
from wordgrid.searcher import BoardSearcher, WildcardPolicy
from wordgrid.trie import Trie, make_trie, min_length_filter


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "-t",
        "--no_reuse",
        action="store_true",
        help="Don't allow a path to visit the same cell twice.",
    )
    parser.add_argument(
        "--wildcard_policy",
        type=WildcardPolicy,
        choices=list(WildcardPolicy),
        default=WildcardPolicy.EVERYWHERE,
        help="Whether a wildcard (_) cell can start a path (everywhere) or only "
        "be stepped onto (neighbors_only).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging information to stderr.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default="-",
        help="Path to dictionary file with one word per line. "
        "Use - (the default) to read from stdin.",
    )
    parser.add_argument(
        "--min_length",
        type=int,
        default=3,
        help="Ignore dictionary words shorter than this.",
    )


def setup_logging(args: argparse.Namespace):
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_trie_from_args(args: argparse.Namespace) -> tuple[Trie, list[str]]:
    with fileinput.input(files=(args.dictionary,)) as lines:
        t, rejected = make_trie(lines, min_length_filter(args.min_length))
    assert t
    return t, rejected


def get_board_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> Board:
    try:
        return Board(args.rows, args.cols, args.letters)
    except ConfigError as e:
        parser.error(str(e))


def get_searcher_from_args(
    args: argparse.Namespace, trie: Trie, board: Board
) -> BoardSearcher:
    return BoardSearcher(
        trie,
        board,
        no_reuse=args.no_reuse,
        wildcard_policy=args.wildcard_policy,
    )
