from dataclasses import replace

from pytest import mark

from gridwalk.grid.coords import Pos
from gridwalk.puzzles.reindeer_maze import (
    ReindeerState,
    best_path_tiles,
    best_paths,
    maze_from_str,
    solve,
)
from gridwalk.search.optimal_paths import optimal_path_states
from gridwalk.search.path_search import path_cost

example_input = (
    "###############\n#.......#....E#\n#.#.###.#.###.#\n#.....#.#...#.#\n"
    + "#.###.#####.#.#\n#.#.#.......#.#\n#.#.#####.###.#\n#...........#.#\n"
    + "###.#.#####.#.#\n#...#.....#.#.#\n#.#.#.###.#.#.#\n#.....#...#.#.#\n"
    + "#.###.#.#.#.#.#\n#S..#.....#...#\n###############"
)

second_example_input = (
    "#################\n#...#...#...#..E#\n#.#.#.#.#.#.#.#.#\n#.#.#.#...#...#.#\n"
    + "#.#.#.#.###.#.#.#\n#...#.#.#.....#.#\n#.#.#.#.#.#####.#\n#.#...#.#.#.....#\n"
    + "#.#.#####.#.###.#\n#.#.#.......#...#\n#.#.###.#####.###\n#.#.#...#.....#.#\n"
    + "#.#.#.#####.###.#\n#.#.#.........#.#\n#.#.#.#########.#\n#S#.............#\n"
    + "#################"
)


def test_parse_maze():
    maze = maze_from_str(example_input)
    assert maze.start_pos == Pos(1, 13)
    assert maze.end_pos == Pos(13, 1)
    assert maze.tiles[Pos(0, 0)] == "wall"
    assert maze.tiles[Pos(1, 13)] == "floor"
    assert maze_from_str(example_input) == maze


@mark.parametrize(
    "maze_str, expected",
    [
        (example_input, (7036, 45)),
        (second_example_input, (11048, 64)),
        ("#####\n#S.E#\n#####", (2, 3)),
    ],
)
def test_solve(maze_str, expected):
    assert solve(maze_str) == expected


def test_best_path_tiles_include_start_and_end():
    maze = maze_from_str(example_input)
    tiles = best_path_tiles(maze)
    assert maze.start_pos in tiles
    assert maze.end_pos in tiles
    assert all(maze.tiles[pos] == "floor" for pos in tiles)


def test_best_paths_replay():
    maze = maze_from_str(example_input)
    result = best_paths(maze)
    for goal_state in result.goal_states:
        assert path_cost(maze, result.state_path(goal_state)) == 7036


def test_turns_are_tracked_per_facing():
    maze = maze_from_str("#####\n#S..#\n###.#\n###E#\n#####")
    result = best_paths(maze)
    assert result.min_cost == 1004

    states = optimal_path_states(result.state_predecessors, result.goal_states)
    assert ReindeerState(Pos(3, 1), "east") in states
    assert ReindeerState(Pos(3, 1), "south") in states


def test_required_end_facing():
    maze = maze_from_str("#####\n#S.E#\n#####")
    assert best_paths(maze).min_cost == 2

    facing_north = replace(maze, end_facing="north")
    assert best_paths(facing_north).min_cost == 1002
