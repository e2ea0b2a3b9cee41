"""
Grid path search: PathSearchProblems whose rules are a single transition function.

Grid puzzles usually describe a move as "from this state, try this action; it
either works (landing somewhere, at some cost) or it doesn't". Subclasses
implement exactly that as transition(), and get the PathSearchProblem methods
for free. Illegal moves (walls, edges, over-steep climbs) are just None; they
prune the branch and are never errors.
"""
from abc import abstractmethod

from gridwalk.grid.coords import Pos
from gridwalk.search.path_search import Action, PathSearchProblem, State


class GridPathSearchProblem(PathSearchProblem[State, Action]):
    @abstractmethod
    def candidate_actions(self, state: State) -> list[Action]:
        """Every action worth trying from state; legality is up to transition()."""

    @abstractmethod
    def transition(self, state: State, action: Action) -> tuple[State, float] | None:
        pass

    def state_transitions(self, state: State) -> list[tuple[Action, State, float]]:
        transitions = []
        for action in self.candidate_actions(state):
            if (result := self.transition(state, action)) is not None:
                next_state, action_cost = result
                transitions.append((action, next_state, action_cost))

        return transitions

    def state_actions(self, state: State) -> list[Action]:
        return [action for action, _, _ in self.state_transitions(state)]

    def state_action_result(self, state: State, action: Action) -> State:
        return self._legal_transition(state, action)[0]

    def state_action_cost(self, state: State, action: Action) -> float:
        return self._legal_transition(state, action)[1]

    def _legal_transition(self, state: State, action: Action) -> tuple[State, float]:
        result = self.transition(state, action)
        if result is None:
            raise ValueError(f"Action {action} is illegal in state {state}.")

        return result


def state_pos(state) -> Pos:
    """Position of a search state: the state itself, or its pos field."""
    if isinstance(state, Pos):
        return state

    return state.pos
