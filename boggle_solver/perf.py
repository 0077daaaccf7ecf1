#!/usr/bin/env python
"""I/O-free performance test.

$ python -m boggle_solver.perf --rows 4 --columns 4 \\
    --dictionary wordlists/words.txt --random_seed 808813 1000
"""

import argparse
import random
import sys
import time

from tqdm import tqdm

from boggle_solver.args import add_standard_args, get_trie_from_args
from boggle_solver.board import Board
from boggle_solver.boggler import Boggler
from boggle_solver.trie import LETTER_A


def random_board(rows: int, columns: int) -> Board:
    n = rows * columns
    return Board(rows, columns, [chr(LETTER_A + random.randint(0, 25)) for _ in range(n)])


def main():
    parser = argparse.ArgumentParser(
        prog="Boggler perf test",
        description="Measure the speed of board searches, free from I/O.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to search",
        default=1_000,
        nargs="?",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)
    if args.dictionary is None:
        parser.error("--dictionary is required")

    rows = 4 if args.rows is None else args.rows
    columns = 4 if args.columns is None else args.columns
    if rows < 1 or columns < 1:
        parser.error("--rows and --columns must be positive")
    n = args.num_boards
    t = get_trie_from_args(args)
    if t is None:
        sys.exit(1)
    boggler = Boggler(t, repeat_letters=not args.no_repeat_letters)

    print(f"Generating {n} {rows}x{columns} boards...")
    boards = [random_board(rows, columns) for _ in range(n)]

    total_words = 0
    start_s = time.time()
    for board in tqdm(boards, smoothing=0):
        total_words += len(boggler.search(board))
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(boards) / elapsed_s if elapsed_s else float("inf")

    print(f"{total_words=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
