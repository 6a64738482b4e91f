#!/usr/bin/env python
"""I/O-free performance test.

$ python -m wordgrid.perf --dictionary wordlist.txt --rows 4 --cols 4 1000
"""

import argparse
import random
import time

from tqdm import tqdm

from wordgrid.args import add_standard_args, get_trie_from_args, setup_logging
from wordgrid.board import WILDCARD, Board
from wordgrid.report import found_words
from wordgrid.searcher import BoardSearcher
from wordgrid.trie import LETTER_A


def random_board(n: int, wildcard_rate=0.0) -> str:
    return "".join(
        WILDCARD
        if random.random() < wildcard_rate
        else chr(LETTER_A + random.randint(0, 25))
        for _ in range(n)
    )


def main():
    parser = argparse.ArgumentParser(
        prog="Board search perf test",
        description="Measure the speed of board searches, free from I/O.",
    )
    add_standard_args(parser)
    parser.add_argument("--rows", type=int, default=4, help="Board rows.")
    parser.add_argument("--cols", type=int, default=4, help="Board columns.")
    parser.add_argument(
        "--random_seed",
        help="Explicitly set the random seed.",
        type=int,
        default=-1,
    )
    parser.add_argument(
        "--wildcard_rate",
        type=float,
        default=0.0,
        help="Probability that any given cell is a wildcard.",
    )
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to evaluate",
        default=1_000,
        nargs="?",
    )
    args = parser.parse_args()
    setup_logging(args)
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    t, _ = get_trie_from_args(args)
    n = args.rows * args.cols
    print(f"Generating {args.num_boards} {args.rows}x{args.cols} boards...")
    boards = [
        Board(args.rows, args.cols, random_board(n, args.wildcard_rate))
        for _ in range(args.num_boards)
    ]

    total_visits = 0
    print("Searching boards...")
    start_s = time.perf_counter()
    for board in tqdm(boards, smoothing=0):
        searcher = BoardSearcher(
            t,
            board,
            no_reuse=args.no_reuse,
            wildcard_policy=args.wildcard_policy,
        )
        total_visits += searcher.search()
    end_s = time.perf_counter()

    elapsed_s = end_s - start_s
    pace = len(boards) / elapsed_s
    found = sum(1 for _ in found_words(t))

    print(f"{total_visits=} {found=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
