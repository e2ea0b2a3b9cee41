"""
Puzzle registry: look up and run puzzle solvers by "<year>-<day>" name.

>>> solved_puzzle("2024-10", "0123\\n1234\\n8765\\n9876")
(1, 16)
"""
from logging import getLogger
from time import time
from typing import Callable

from gridwalk.puzzles import (
    garden_regions,
    heat_loss,
    hiking_trail,
    hill_climb,
    light_beams,
    pipe_maze,
    reindeer_maze,
    rock_tilt,
)

logger = getLogger(__name__)

Answers = tuple[int, int]

puzzle_solvers: dict[str, Callable[..., Answers]] = {
    "2022-12": hill_climb.solve,
    "2023-10": pipe_maze.solve,
    "2023-14": rock_tilt.solve,
    "2023-16": light_beams.solve,
    "2023-17": heat_loss.solve,
    "2024-10": hiking_trail.solve,
    "2024-12": garden_regions.solve,
    "2024-16": reindeer_maze.solve,
}

# Solvers with a show_progressbar option for their slow brute-force parts.
progressbar_puzzles = {"2023-16"}


def solved_puzzle(name: str, text: str, show_progressbar: bool = False) -> Answers:
    if name not in puzzle_solvers:
        raise KeyError(
            f"Unknown puzzle {name!r}; expected one of {', '.join(puzzle_solvers)}."
        )

    start_time = time()
    if show_progressbar and name in progressbar_puzzles:
        answers = puzzle_solvers[name](text, show_progressbar=True)
    else:
        answers = puzzle_solvers[name](text)

    logger.debug(f"Solved {name} in {time() - start_time:.3f}s.")

    return answers
