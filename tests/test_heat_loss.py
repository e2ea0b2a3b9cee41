from pytest import fixture, mark

from gridwalk.grid.coords import Pos
from gridwalk.puzzles.heat_loss import (
    CrucibleProblem,
    CrucibleState,
    city_from_str,
    min_heat_loss,
    part_a,
    part_b,
    solve,
)
from gridwalk.search.path_search import dijkstra_searched_result, path_cost

example_input = (
    "2413432311323\n3215453535623\n3255245654254\n3446585845452\n"
    + "4546657867536\n1438598798454\n4457876987766\n3637877979653\n"
    + "4654967986887\n4564679986453\n1224686865563\n2546548887735\n"
    + "4322674655533\n"
)


@fixture
def example_city():
    return city_from_str(example_input)


def test_parse_city(example_city):
    assert (example_city.width, example_city.height) == (13, 13)
    assert example_city[Pos(0, 0)] == 2
    assert example_city[Pos(12, 12)] == 3


def test_part_a(example_city):
    assert part_a(example_city) == 102


@mark.parametrize(
    "city_str, expected",
    [
        (example_input, 94),
        ("111111111111\n999999999991\n999999999991\n999999999991\n999999999991", 71),
    ],
)
def test_part_b(city_str, expected):
    assert part_b(city_from_str(city_str)) == expected


def test_solve():
    assert solve(example_input) == (102, 94)


def test_single_block_city():
    assert solve("5") == (0, 0)


def test_streak_limits(example_city):
    problem = CrucibleProblem(example_city)
    result = dijkstra_searched_result(problem)
    path = result.state_path(result.goal_states[0])

    assert path_cost(problem, path) == 102
    assert all(state.streak <= 3 for state in path)
    for state, next_state in zip(path[1:], path[2:]):
        if next_state.facing != state.facing:
            assert next_state.streak == 1


def test_ultra_crucible_must_run_before_turning(example_city):
    problem = CrucibleProblem(example_city, min_streak=4, max_streak=10)
    assert problem.candidate_actions(CrucibleState(Pos(3, 0), "east", 3)) == ["east"]
    assert problem.candidate_actions(CrucibleState(Pos(4, 0), "east", 4)) == [
        "east",
        "north",
        "south",
    ]
    assert problem.candidate_actions(CrucibleState(Pos(9, 0), "east", 10)) == [
        "north",
        "south",
    ]


def test_no_reversing():
    problem = CrucibleProblem(city_from_str("11\n11"))
    actions = problem.candidate_actions(CrucibleState(Pos(1, 0), "east", 1))
    assert "west" not in actions


def test_straight_line_limit():
    # Without the streak limit this would cost 13.
    assert min_heat_loss(city_from_str("11111\n99999"), max_streak=3) == 21
