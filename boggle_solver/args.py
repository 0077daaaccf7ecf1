"""Standard command-line arguments shared across many tools."""

import argparse
import sys

from boggle_solver.trie import Trie


def add_standard_args(
    parser: argparse.ArgumentParser, *, board_file=False, random_seed=False
):
    parser.add_argument(
        "--rows",
        type=int,
        help="Number of rows on the board.",
    )
    parser.add_argument(
        "--columns",
        type=int,
        help="Number of columns on the board.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--no_repeat_letters",
        action="store_true",
        help="Don't allow a word to use the same letter twice, even from "
        "different cells.",
    )

    if board_file:
        parser.add_argument(
            "--board",
            type=str,
            help="Path to a board file with one row of letters per line.",
        )
    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_trie_from_args(args: argparse.Namespace) -> Trie | None:
    t = Trie()
    if not t.load_dictionary(args.dictionary):
        sys.stderr.write(f"Invalid dictionary: {args.dictionary}\n")
        return None
    return t
