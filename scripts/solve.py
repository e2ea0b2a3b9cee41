#!/usr/bin/env python

from argparse import ArgumentParser
from logging import DEBUG, INFO, basicConfig
from pathlib import Path
from time import time

from gridwalk.puzzles.registry import puzzle_solvers, solved_puzzle


def solve_puzzle(name: str, inputs_dir: Path, show_progressbar: bool = False):
    input_path = inputs_dir / f"{name}.txt"
    text = input_path.read_text()

    start_time = time()
    answer_a, answer_b = solved_puzzle(name, text, show_progressbar)
    elapsed = time() - start_time

    print(f"{name}: ({answer_a}, {answer_b}) in {elapsed * 1000:.1f}ms")


def arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Solve grid puzzles from their plain-text inputs.",
    )
    parser.add_argument(
        "puzzle_names",
        nargs="*",
        help="puzzles to solve, like 2023-17",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="solve every known puzzle, in order",
    )
    parser.add_argument(
        "--inputs-dir",
        type=Path,
        default=Path("inputs"),
        help="directory holding <puzzle>.txt input files",
    )
    parser.add_argument(
        "--list-puzzles",
        action="store_true",
        help="list the available puzzles",
    )
    parser.add_argument(
        "--progressbar",
        action="store_true",
        help="show progress bars for slow brute-force searches",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log search details",
    )
    return parser


def main():
    parser = arg_parser()
    args = parser.parse_args()
    basicConfig(level=DEBUG if args.verbose else INFO)

    if args.list_puzzles:
        print("\n".join(puzzle_solvers))
        return

    puzzle_names = list(puzzle_solvers) if args.all else args.puzzle_names
    if len(puzzle_names) == 0:
        parser.error("name at least one puzzle, or pass --all")

    for name in puzzle_names:
        solve_puzzle(name, args.inputs_dir, show_progressbar=args.progressbar)


if __name__ == "__main__":
    main()
