from gridwalk.grid.coords import Pos
from gridwalk.grid.grid import grid_from_str
from gridwalk.search.cycles import iterated_state
from gridwalk.search.flood_fill import (
    bfs_distances,
    connected_regions,
    counted_paths,
    reachable_states,
)

open_field = grid_from_str("...\n.#.\n...", str)


def open_neighbors(pos: Pos) -> list[Pos]:
    return [
        neighbor_pos
        for _, neighbor_pos in open_field.neighbors(pos)
        if open_field[neighbor_pos] == "."
    ]


def test_reachable_states_skip_walls():
    reachable = reachable_states([Pos(0, 0)], open_neighbors)
    assert len(reachable) == 8
    assert Pos(1, 1) not in reachable


def test_bfs_distances_go_around_walls():
    distances = bfs_distances([Pos(0, 0)], open_neighbors)
    assert distances[Pos(0, 0)] == 0
    assert distances[Pos(2, 2)] == 4
    assert distances[Pos(1, 2)] == 3
    assert Pos(1, 1) not in distances


def test_bfs_distances_multiple_sources():
    distances = bfs_distances([Pos(0, 0), Pos(2, 2)], open_neighbors)
    assert max(distances.values()) == 2


def test_connected_regions_cover_grid():
    regions = connected_regions(open_field)
    assert [len(region) for region in regions] == [8, 1]
    assert set().union(*regions) == set(open_field.positions())


def test_connected_regions_custom_predicate():
    grid = grid_from_str("1234\n9876", int)
    regions = connected_regions(grid, lambda a, b: abs(a - b) == 1)
    assert [sorted(region) for region in regions] == [
        [Pos(0, 0), Pos(1, 0), Pos(2, 0), Pos(3, 0)],
        [Pos(0, 1), Pos(1, 1), Pos(2, 1), Pos(3, 1)],
    ]


def test_counted_paths_on_a_grid():
    # Monotone (east/south only) lattice paths across a 3x3 grid.
    def east_south(pos: Pos) -> list[Pos]:
        return [
            next_pos
            for next_pos in (Pos(pos.x + 1, pos.y), Pos(pos.x, pos.y + 1))
            if next_pos in open_field
        ]

    assert counted_paths(Pos(0, 0), east_south, lambda pos: pos == Pos(2, 2)) == 6


def test_iterated_state_without_cycle():
    assert iterated_state(0, lambda n: n + 1, 100) == 100
    assert iterated_state("a", lambda text: text + "a", 0) == "a"
