"""
Heat loss routing (2023 day 17): steer a crucible from the top-left city block
to the bottom-right one, losing each entered block's heat-loss digit.

Crucibles can't reverse, and must turn after max_streak blocks in a straight
line. Ultra crucibles must also travel min_streak blocks before they may turn
(or stop at the goal).

The streak counter and facing are part of the search state; dropping either
merges physically different situations and gives wrong answers.
"""
from dataclasses import dataclass
from typing import NamedTuple

from gridwalk.grid.coords import (
    Direction,
    Pos,
    clockwise_direction,
    counterclockwise_direction,
    direction_unit_pos,
)
from gridwalk.grid.grid import Grid, grid_from_str
from gridwalk.search.grid_search import GridPathSearchProblem
from gridwalk.search.path_search import dijkstra_searched_result


class CrucibleState(NamedTuple):
    pos: Pos
    facing: Direction
    streak: int


@dataclass(frozen=True)
class CrucibleProblem(GridPathSearchProblem[CrucibleState, Direction]):
    """
    >>> problem = CrucibleProblem(city_from_str("19\\n11"))
    >>> dijkstra_searched_result(problem).min_cost
    2
    """

    city: Grid[int]
    min_streak: int = 1
    max_streak: int = 3

    @property
    def start_pos(self) -> Pos:
        return Pos(0, 0)

    @property
    def end_pos(self) -> Pos:
        return Pos(self.city.width - 1, self.city.height - 1)

    def initial_states(self) -> list[CrucibleState]:
        # A zero streak means "hasn't moved yet"; either first move is fine.
        return [
            CrucibleState(self.start_pos, "east", 0),
            CrucibleState(self.start_pos, "south", 0),
        ]

    def candidate_actions(self, state: CrucibleState) -> list[Direction]:
        actions: list[Direction] = []
        if state.streak < self.max_streak:
            actions.append(state.facing)

        if state.streak == 0 or state.streak >= self.min_streak:
            actions.append(counterclockwise_direction[state.facing])
            actions.append(clockwise_direction[state.facing])

        return actions

    def transition(
        self, state: CrucibleState, action: Direction
    ) -> tuple[CrucibleState, float] | None:
        next_pos = state.pos + direction_unit_pos[action]
        heat_loss = self.city.get(next_pos)
        if heat_loss is None:
            return None

        streak = state.streak + 1 if action == state.facing else 1
        return CrucibleState(next_pos, action, streak), heat_loss

    def is_goal_state(self, state: CrucibleState) -> bool:
        # A zero streak is only possible at the start, when start and end coincide.
        return state.pos == self.end_pos and (
            state.streak == 0 or state.streak >= self.min_streak
        )

    def min_cost(self, state: CrucibleState) -> float:
        return (self.end_pos - state.pos).l1()


def city_from_str(text: str) -> Grid[int]:
    return grid_from_str(text, int)


def min_heat_loss(city: Grid[int], min_streak: int = 1, max_streak: int = 3) -> int:
    problem = CrucibleProblem(city, min_streak=min_streak, max_streak=max_streak)
    return int(dijkstra_searched_result(problem).min_cost)


def part_a(city: Grid[int]) -> int:
    return min_heat_loss(city, min_streak=1, max_streak=3)


def part_b(city: Grid[int]) -> int:
    return min_heat_loss(city, min_streak=4, max_streak=10)


def solve(text: str) -> tuple[int, int]:
    city = city_from_str(text)
    return part_a(city), part_b(city)
