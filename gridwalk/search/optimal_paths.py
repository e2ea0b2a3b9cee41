"""
Optimal path membership: which states (or grid cells) lie on any optimal path.

Walks a predecessor graph (see dijkstra_searched_result) backwards from every
goal state tied at the minimum cost.

>>> predecessors = {
...     "start": set(),
...     "left": {"start"},
...     "right": {"start"},
...     "end": {"left", "right"},
...     "detour": {"start"},
... }
>>> sorted(optimal_path_states(predecessors, ["end"]))
['end', 'left', 'right', 'start']
"""
from typing import Callable, Iterable, TypeVar

from gridwalk.grid.coords import Pos
from gridwalk.search.grid_search import state_pos

State = TypeVar("State")


def optimal_path_states(
    state_predecessors: dict[State, set[State]],
    goal_states: Iterable[State],
) -> set[State]:
    # Keyed on whole states: the same cell reached facing different ways has
    # independent predecessor chains.
    expanded_states: set[State] = set()
    worklist = list(goal_states)
    while len(worklist) > 0:
        state = worklist.pop()
        if state in expanded_states:
            continue

        expanded_states.add(state)
        worklist.extend(state_predecessors.get(state, ()))

    return expanded_states


def optimal_path_positions(
    state_predecessors: dict[State, set[State]],
    goal_states: Iterable[State],
    pos_of_state: Callable[[State], Pos] = state_pos,
) -> set[Pos]:
    return {
        pos_of_state(state)
        for state in optimal_path_states(state_predecessors, goal_states)
    }
