"""
Hill climbing (2022 day 12): on a heightmap of letters a-z, walk from S (height
a) to E (height z), climbing at most one level per step; descents are free.

Part A is the fewest steps from S. Part B is the fewest steps from any square
of height a; we search backwards from E once, with the climbing rule reversed,
rather than once per starting square.
"""
from dataclasses import dataclass
from string import ascii_lowercase

from gridwalk.errors import PuzzleLogicError
from gridwalk.grid.coords import Direction, Pos, direction_unit_pos, directions
from gridwalk.grid.grid import Grid, grid_from_str, marker_pos
from gridwalk.search.flood_fill import bfs_distances
from gridwalk.search.grid_search import GridPathSearchProblem
from gridwalk.search.path_search import a_star_bfs_searched_solution

max_climb = 1

marker_heights = {"S": "a", "E": "z"}


def height_from_char(char: str) -> int:
    return ascii_lowercase.index(marker_heights.get(char, char))


@dataclass(frozen=True)
class HillClimbProblem(GridPathSearchProblem[Pos, Direction]):
    heights: Grid[int]
    start_pos: Pos
    end_pos: Pos

    def initial_states(self) -> list[Pos]:
        return [self.start_pos]

    def candidate_actions(self, state: Pos) -> list[Direction]:
        return directions

    def transition(self, state: Pos, action: Direction) -> tuple[Pos, float] | None:
        next_pos = state + direction_unit_pos[action]
        next_height = self.heights.get(next_pos)
        if next_height is None or next_height > self.heights[state] + max_climb:
            return None

        return next_pos, 1

    def is_goal_state(self, state: Pos) -> bool:
        return state == self.end_pos

    def min_cost(self, state: Pos) -> float:
        return (self.end_pos - state).l1()


def problem_from_str(text: str) -> HillClimbProblem:
    return HillClimbProblem(
        heights=grid_from_str(text, height_from_char),
        start_pos=marker_pos(text, "S"),
        end_pos=marker_pos(text, "E"),
    )


def downhill_neighbors(heights: Grid[int], pos: Pos) -> list[Pos]:
    """Squares which could climb to pos in one step."""
    return [
        neighbor_pos
        for _, neighbor_pos in heights.neighbors(pos)
        if heights[pos] <= heights[neighbor_pos] + max_climb
    ]


def part_a(problem: HillClimbProblem) -> int:
    max_steps = problem.heights.width * problem.heights.height
    return len(a_star_bfs_searched_solution(problem, max_steps=max_steps))


def part_b(problem: HillClimbProblem) -> int:
    heights = problem.heights
    distances = bfs_distances(
        [problem.end_pos], lambda pos: downhill_neighbors(heights, pos)
    )
    trail_lengths = [
        distances[pos] for pos in heights.positions_of(0) if pos in distances
    ]
    if len(trail_lengths) == 0:
        raise PuzzleLogicError("No lowest square can reach the summit.")

    return min(trail_lengths)


def solve(text: str) -> tuple[int, int]:
    problem = problem_from_str(text)
    return part_a(problem), part_b(problem)
