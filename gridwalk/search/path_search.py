"""
Path search: Use graph search algorithms (such as A* and Dijkstra's algorithm)
to find solutions to well defined problems.

Problems are specified by subclassing (then instantiating) PathSearchProblems.

Once problems are specified, we provide two search methods for problems:
- a_star_bfs_searched_solution
    Breadth-first A* search of the solution space.
    Returns the action sequence of a single optimal solution.

- dijkstra_searched_result
    Exhaustive best-first search for every optimal solution.
    Returns the minimum cost, every goal state reached at that cost, and the
    predecessor graph of all states tied for optimal. Pair it with
    gridwalk.search.optimal_paths to find everything that lies on any optimal
    path.

These methods raise the SearchErrors NoSolutionError and SearchTimeoutError on
failure.
"""
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count
from logging import getLogger
from math import inf
from typing import Generator, Generic, Literal, Optional, TypeVar

State = TypeVar("State")
Action = TypeVar("Action")

logger = getLogger(__name__)


class PathSearchProblem(Generic[State, Action], metaclass=ABCMeta):
    @abstractmethod
    def initial_states(self) -> list[State]:
        pass

    @abstractmethod
    def state_actions(self, state: State) -> list[Action]:
        pass

    @abstractmethod
    def state_action_result(self, state: State, action: Action) -> State:
        pass

    @abstractmethod
    def state_action_cost(self, state: State, action: Action) -> float:
        pass

    @abstractmethod
    def is_goal_state(self, state: State) -> bool:
        pass

    def min_cost(self, state: State) -> float:
        """Admissible estimate of the remaining cost to any goal."""
        return 0

    def state_transitions(self, state: State) -> list[tuple[Action, State, float]]:
        return [
            (
                action,
                self.state_action_result(state, action),
                self.state_action_cost(state, action),
            )
            for action in sorted(self.state_actions(state))  # type: ignore
        ]

    def expanding_state(self, state: State, cost: float) -> None:
        pass

    def relaxing_state(self, state: State, cost: float) -> None:
        pass


@dataclass
class Step(Generic[State, Action]):
    parent_step: Optional["Step"]
    action: Action
    state: State
    cost: float
    min_cost: float

    def action_sequence(self) -> list[Action]:
        sequence = []
        step: Step | None = self
        while step is not None:
            sequence.append(step.action)
            step = step.parent_step

        return list(reversed(sequence))[1:]  # First action is always None.

    def next_steps(self, problem: PathSearchProblem) -> Generator["Step", None, None]:
        for action, next_state, action_cost in problem.state_transitions(self.state):
            yield Step(
                state=next_state,
                parent_step=self,
                action=action,
                cost=(next_cost := self.cost + action_cost),
                min_cost=next_cost + problem.min_cost(next_state),
            )

    @staticmethod
    def initial_step(state: State, min_cost: float = 0) -> "Step":
        return Step(
            state=state,
            parent_step=None,
            action=None,
            cost=0,
            min_cost=min_cost,
        )

    def __eq__(self, other) -> bool:
        return self.min_cost == other.min_cost

    def __lt__(self, other) -> bool:
        return self.min_cost < other.min_cost

    def __le__(self, other) -> bool:
        return self.min_cost <= other.min_cost

    def __gt__(self, other) -> bool:
        return self.min_cost > other.min_cost

    def __ge__(self, other) -> bool:
        return self.min_cost >= other.min_cost


class SearchError(Exception):
    pass


class NoSolutionError(SearchError):
    pass


class SearchTimeoutError(SearchError):
    pass


def a_star_bfs_searched_solution(
    problem: PathSearchProblem[State, Action],
    max_steps: int = 10_000,
) -> list[Action]:
    next_best_action_heap = [
        Step.initial_step(state, problem.min_cost(state))
        for state in problem.initial_states()
    ]
    next_best_action_heap.sort()

    explored_states: set[State] = set()

    remaining_steps: int = max_steps
    while len(next_best_action_heap) > 0 and remaining_steps > 0:
        step = heappop(next_best_action_heap)
        if step.state in explored_states:
            continue

        if problem.is_goal_state(step.state):
            return step.action_sequence()

        explored_states.add(step.state)

        problem.expanding_state(step.state, step.cost)  # Just for debugging.
        for next_step in step.next_steps(problem):
            if next_step.state not in explored_states:
                heappush(next_best_action_heap, next_step)

        remaining_steps -= 1

    else:
        if len(next_best_action_heap) > 0:
            raise SearchTimeoutError(f"Could not find solution in {max_steps} steps.")
        else:
            raise NoSolutionError("Path search problem has no solutions.")


@dataclass
class SearchResult(Generic[State]):
    """
    Everything Dijkstra's algorithm learned about the optimal solutions.

    state_predecessors maps each reached state to every state that reaches it
    at its best known cost; initial states have no predecessors.
    """

    min_cost: float
    goal_states: list[State]
    state_costs: dict[State, float] = field(repr=False)
    state_predecessors: dict[State, set[State]] = field(repr=False)

    def state_path(self, goal_state: State) -> list[State]:
        """One optimal path (initial state first) ending in goal_state."""
        path = [goal_state]
        seen_states = {goal_state}
        while predecessors := self.state_predecessors[path[-1]]:
            state = min(predecessors)  # type: ignore
            if state in seen_states:
                raise SearchError(f"Predecessor cycle through {state}.")

            seen_states.add(state)
            path.append(state)

        return list(reversed(path))


def dijkstra_searched_result(
    problem: PathSearchProblem[State, Action],
    max_steps: int | None = None,
) -> SearchResult[State]:
    """
    Dijkstra's algorithm, keeping every equally-good predecessor of each state.

    The frontier is a min-heap of (cost, tiebreak, state) entries, and may hold
    stale entries; states popped at a worse cost than their best are skipped.
    Goal states are terminal. The search keeps going after the first goal is
    popped, until the frontier's costs exceed the best goal cost, so every goal
    state tied at the minimum is found.
    """
    tiebreaks = count()
    frontier: list[tuple[float, int, State]] = []
    state_costs: dict[State, float] = {}
    state_predecessors: dict[State, set[State]] = {}

    for state in problem.initial_states():
        state_costs[state] = 0
        state_predecessors[state] = set()
        heappush(frontier, (0, next(tiebreaks), state))

    goal_cost: float = inf
    goal_states: list[State] = []
    expanded_count = 0
    while len(frontier) > 0:
        cost, _, state = heappop(frontier)
        if cost > state_costs[state]:
            continue

        if cost > goal_cost:
            break

        if problem.is_goal_state(state):
            goal_cost = cost
            goal_states.append(state)
            continue

        if max_steps is not None and expanded_count >= max_steps:
            raise SearchTimeoutError(f"Could not find solution in {max_steps} steps.")
        expanded_count += 1

        problem.expanding_state(state, cost)
        for _action, next_state, action_cost in problem.state_transitions(state):
            next_cost = cost + action_cost
            prev_cost = state_costs.get(next_state, inf)
            if next_cost < prev_cost:
                problem.relaxing_state(next_state, next_cost)
                state_costs[next_state] = next_cost
                state_predecessors[next_state] = {state}
                heappush(frontier, (next_cost, next(tiebreaks), next_state))
            elif next_cost == prev_cost:
                state_predecessors[next_state].add(state)

    logger.debug(
        f"Expanded {expanded_count} states, reached {len(state_costs)}; "
        + f"{len(goal_states)} goal states at cost {goal_cost}."
    )

    if len(goal_states) == 0:
        raise NoSolutionError("Path search problem has no solutions.")

    return SearchResult(
        min_cost=goal_cost,
        goal_states=goal_states,
        state_costs=state_costs,
        state_predecessors=state_predecessors,
    )


def path_cost(problem: PathSearchProblem[State, Action], states: list[State]) -> float:
    """
    Replay a state sequence using the problem's transitions, totalling the cost.

    Raises ValueError if any step isn't a legal transition.
    """
    total_cost: float = 0
    for state, next_state in zip(states, states[1:]):
        step_costs = [
            action_cost
            for _action, result, action_cost in problem.state_transitions(state)
            if result == next_state
        ]
        if len(step_costs) == 0:
            raise ValueError(f"No transition from {state} to {next_state}.")

        total_cost += min(step_costs)

    return total_cost


AlgoAction = Literal[
    "initial_states",
    "state_actions",
    "state_action_result",
    "state_action_cost",
    "is_goal_state",
    "min_cost",
    "expanding_state",
    "relaxing_state",
]


@dataclass
class AlgoTraceStep(Generic[State, Action]):
    algo_action: AlgoAction
    state: State | None = None
    action: Action | None = None
    cost: float | None = None


@dataclass
class TracedPathSearchProblem(PathSearchProblem[State, Action]):
    """
    Record the algorithmic steps taken by the path search algorithm for analysis.
    """

    problem: PathSearchProblem[State, Action]
    algo_steps: list[AlgoTraceStep[State, Action]] = field(default_factory=list)

    def initial_states(self) -> list[State]:
        self.algo_steps.append(AlgoTraceStep("initial_states"))
        return self.problem.initial_states()

    def state_actions(self, state: State) -> list[Action]:
        self.algo_steps.append(AlgoTraceStep("state_actions", state))
        return self.problem.state_actions(state)

    def state_action_result(self, state: State, action: Action) -> State:
        self.algo_steps.append(AlgoTraceStep("state_action_result", state, action))
        return self.problem.state_action_result(state, action)

    def state_action_cost(self, state: State, action: Action) -> float:
        self.algo_steps.append(AlgoTraceStep("state_action_cost", state, action))
        return self.problem.state_action_cost(state, action)

    def is_goal_state(self, state: State) -> bool:
        self.algo_steps.append(AlgoTraceStep("is_goal_state", state))
        return self.problem.is_goal_state(state)

    def min_cost(self, state: State) -> float:
        self.algo_steps.append(AlgoTraceStep("min_cost", state))
        return self.problem.min_cost(state)

    def expanding_state(self, state: State, cost: float) -> None:
        self.algo_steps.append(AlgoTraceStep("expanding_state", state, cost=cost))

    def relaxing_state(self, state: State, cost: float) -> None:
        self.algo_steps.append(AlgoTraceStep("relaxing_state", state, cost=cost))
