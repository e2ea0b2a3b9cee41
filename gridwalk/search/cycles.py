"""
Cycle detection for long-running deterministic simulations.

Simulations which must run for billions of steps almost always fall into a
loop. We hash the full state after every step; once a state repeats, the rest
of the run is skipped using the detected period.
"""
from logging import getLogger
from typing import Callable, Hashable, TypeVar

State = TypeVar("State", bound=Hashable)

logger = getLogger(__name__)


def iterated_state(
    state: State,
    step: Callable[[State], State],
    iterations: int,
) -> State:
    """
    Apply step to state `iterations` times.

    >>> iterated_state(0, lambda n: (n + 1) % 7, 1_000_000_000_000)
    1
    >>> iterated_state(3, lambda n: n * 2 if n < 20 else 5, 10)
    5
    """
    if iterations < 0:
        raise ValueError("Can't iterate a negative number of times.")

    state_iterations: dict[State, int] = {}
    history: list[State] = []
    for iteration in range(iterations):
        if state in state_iterations:
            cycle_start = state_iterations[state]
            period = iteration - cycle_start
            logger.debug(
                f"State at iteration {iteration} repeats iteration {cycle_start} "
                + f"(period {period})."
            )
            return history[cycle_start + (iterations - cycle_start) % period]

        state_iterations[state] = iteration
        history.append(state)
        state = step(state)

    return state
