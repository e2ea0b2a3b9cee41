"""
Reindeer maze (2024 day 16): find the lowest score from S to E, where stepping
forward costs 1 and turning in place costs 1000; then count every tile lying on
any lowest-score route.

The reindeer starts facing east. By default it may finish facing any way;
end_facing pins the final direction for variants that need it.
"""
from dataclasses import dataclass
from typing import Literal, NamedTuple

from gridwalk.grid.coords import (
    Direction,
    Pos,
    clockwise_direction,
    counterclockwise_direction,
    direction_unit_pos,
)
from gridwalk.grid.grid import Grid, grid_from_str, marker_pos
from gridwalk.search.grid_search import GridPathSearchProblem
from gridwalk.search.optimal_paths import optimal_path_positions
from gridwalk.search.path_search import SearchResult, dijkstra_searched_result

Tile = Literal["wall", "floor"]
ReindeerAction = Literal["forward", "clockwise", "counterclockwise"]

tile_by_char: dict[str, Tile] = {
    "#": "wall",
    ".": "floor",
    "S": "floor",
    "E": "floor",
}


class ReindeerState(NamedTuple):
    pos: Pos
    facing: Direction


@dataclass(frozen=True)
class ReindeerMaze(GridPathSearchProblem[ReindeerState, ReindeerAction]):
    tiles: Grid[Tile]
    start_pos: Pos
    end_pos: Pos
    start_facing: Direction = "east"
    end_facing: Direction | None = None
    forward_cost: int = 1
    turn_cost: int = 1000

    def initial_states(self) -> list[ReindeerState]:
        return [ReindeerState(self.start_pos, self.start_facing)]

    def candidate_actions(self, state: ReindeerState) -> list[ReindeerAction]:
        return ["forward", "clockwise", "counterclockwise"]

    def transition(
        self, state: ReindeerState, action: ReindeerAction
    ) -> tuple[ReindeerState, float] | None:
        if action == "forward":
            next_pos = state.pos + direction_unit_pos[state.facing]
            if self.tiles.get(next_pos) != "floor":
                return None

            return ReindeerState(next_pos, state.facing), self.forward_cost

        rotation = (
            clockwise_direction if action == "clockwise" else counterclockwise_direction
        )
        return ReindeerState(state.pos, rotation[state.facing]), self.turn_cost

    def is_goal_state(self, state: ReindeerState) -> bool:
        return state.pos == self.end_pos and (
            self.end_facing is None or state.facing == self.end_facing
        )


def maze_from_str(text: str) -> ReindeerMaze:
    """
    >>> maze = maze_from_str("#####\\n#S.E#\\n#####")
    >>> maze.start_pos, maze.end_pos
    (Pos(1, 1), Pos(3, 1))
    """
    return ReindeerMaze(
        tiles=grid_from_str(text, tile_by_char.__getitem__),
        start_pos=marker_pos(text, "S"),
        end_pos=marker_pos(text, "E"),
    )


def best_paths(maze: ReindeerMaze) -> SearchResult[ReindeerState]:
    return dijkstra_searched_result(maze)


def best_path_tiles(maze: ReindeerMaze) -> set[Pos]:
    result = best_paths(maze)
    return optimal_path_positions(result.state_predecessors, result.goal_states)


def solve(text: str) -> tuple[int, int]:
    maze = maze_from_str(text)
    result = best_paths(maze)
    tiles = optimal_path_positions(result.state_predecessors, result.goal_states)
    return int(result.min_cost), len(tiles)
