#!/usr/bin/env python
"""Find all the words on a board and print them.

Any of the board size, dictionary or board file which isn't given as a flag
is prompted for:

$ python -m boggle_solver.solve --rows 4 --columns 4 \\
    --dictionary wordlists/words.txt --board board.txt
"""

import argparse
import sys
import time

from boggle_solver.args import add_standard_args
from boggle_solver.board import Board, BoardFormatError
from boggle_solver.boggler import Boggler
from boggle_solver.trie import Trie


def get_solutions(
    rows: int,
    columns: int,
    dictionary_path: str,
    board_path: str,
    *,
    repeat_letters=True,
) -> set[str]:
    """Load the dictionary and board and find all the words.

    Returns an empty set if either one can't be loaded.
    """
    t = Trie()
    if not t.load_dictionary(dictionary_path):
        sys.stderr.write(f"Invalid dictionary: {dictionary_path}\n")
        return set()

    try:
        board = Board.load(board_path, rows, columns)
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"Invalid board: {e}\n")
        return set()
    except BoardFormatError as e:
        sys.stderr.write(f"Invalid board {board_path}: {e}\n")
        return set()

    return Boggler(t, repeat_letters).search(board)


def prompt_int(question: str) -> int:
    while True:
        answer = input(question + "\n").strip()
        try:
            n = int(answer)
        except ValueError:
            n = 0
        if n > 0:
            return n
        print(f"Please enter a positive whole number, not {answer!r}")


def main():
    parser = argparse.ArgumentParser(
        prog="solve",
        description="Find all the dictionary words on a board of letters.",
    )
    add_standard_args(parser, board_file=True)
    args = parser.parse_args()

    if args.rows is None or args.columns is None:
        print("Enter the dimensions for the board")
    if args.rows is None:
        args.rows = prompt_int("How many rows on the board?")
    if args.columns is None:
        args.columns = prompt_int("How many columns on the board?")
    if args.dictionary is None:
        args.dictionary = input(
            "Enter the path for the dictionary file you wish to use.\n"
        ).strip()
    if args.board is None:
        args.board = input("Enter the path for the board you wish to solve.\n").strip()
    if args.rows < 1 or args.columns < 1:
        parser.error("--rows and --columns must be positive")

    start_s = time.time()
    words = get_solutions(
        args.rows,
        args.columns,
        args.dictionary,
        args.board,
        repeat_letters=not args.no_repeat_letters,
    )
    elapsed_ms = 1000 * (time.time() - start_s)

    for word in sorted(words):
        print(word)
    sys.stderr.write(f"Found {len(words)} words\n")
    sys.stderr.write(f"Solution took {elapsed_ms:.02f} ms to execute\n")


if __name__ == "__main__":
    main()
