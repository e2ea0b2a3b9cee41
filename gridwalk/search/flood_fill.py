"""
Flood fill: unweighted reachability, the degenerate case of path search.

No costs, no goals, no predecessors; just "what can be reached from here".

>>> line = {Pos(0, 0): [Pos(1, 0)], Pos(1, 0): [Pos(2, 0)]}
>>> sorted(reachable_states([Pos(0, 0)], lambda pos: line.get(pos, [])))
[Pos(0, 0), Pos(1, 0), Pos(2, 0)]
"""
from collections import deque
from functools import cache
from typing import Callable, Hashable, Iterable, TypeVar

from gridwalk.grid.coords import Pos
from gridwalk.grid.grid import Cell, Grid

State = TypeVar("State", bound=Hashable)


def reachable_states(
    initial_states: Iterable[State],
    next_states: Callable[[State], Iterable[State]],
) -> set[State]:
    """Every state reachable from initial_states; each state is expanded once."""
    visited_states = set(initial_states)
    stack = list(visited_states)
    while len(stack) > 0:
        state = stack.pop()
        for next_state in next_states(state):
            if next_state not in visited_states:
                visited_states.add(next_state)
                stack.append(next_state)

    return visited_states


def bfs_distances(
    initial_states: Iterable[State],
    next_states: Callable[[State], Iterable[State]],
) -> dict[State, int]:
    """
    Fewest steps from any initial state, for every reachable state.

    >>> distances = bfs_distances([0], lambda n: [n + 1, n + 2] if n < 4 else [])
    >>> pprint(distances)
    {0: 0, 1: 1, 2: 1, 3: 2, 4: 2, 5: 3}
    """
    state_distances = {state: 0 for state in initial_states}
    queue = deque(state_distances)
    while len(queue) > 0:
        state = queue.popleft()
        for next_state in next_states(state):
            if next_state not in state_distances:
                state_distances[next_state] = state_distances[state] + 1
                queue.append(next_state)

    return state_distances


def connected_regions(
    grid: Grid[Cell],
    same_region: Callable[[Cell, Cell], bool] = lambda a, b: a == b,
) -> list[set[Pos]]:
    """
    Split a grid into 4-connected regions, in row-major order of first cell.

    >>> from gridwalk.grid.grid import grid_from_str
    >>> [len(region) for region in connected_regions(grid_from_str("aab\\nbab", str))]
    [3, 2, 1]
    """
    unassigned = set(grid.positions())
    regions = []
    for pos in grid.positions():
        if pos not in unassigned:
            continue

        region = reachable_states(
            [pos],
            lambda region_pos: [
                neighbor_pos
                for _, neighbor_pos in grid.neighbors(region_pos)
                if same_region(grid[region_pos], grid[neighbor_pos])
            ],
        )
        unassigned -= region
        regions.append(region)

    return regions


def counted_paths(
    state: State,
    next_states: Callable[[State], Iterable[State]],
    is_end_state: Callable[[State], bool],
) -> int:
    """
    Number of distinct paths from state to any end state.

    The graph must be acyclic (like a strictly rising climb), so sub-results
    can be memoized on the state alone.

    >>> counted_paths(0, lambda n: [n + 1, n + 2], lambda n: n >= 4)
    8
    """

    @cache
    def paths_from(state: State) -> int:
        if is_end_state(state):
            return 1

        return sum(paths_from(next_state) for next_state in next_states(state))

    return paths_from(state)
