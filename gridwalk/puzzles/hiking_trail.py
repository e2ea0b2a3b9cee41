"""
Hiking trails (2024 day 10): on a topographic map of height digits, a trail
starts at height 0, ends at height 9, and climbs by exactly 1 per step.

Part A scores each trailhead by the number of distinct 9s it reaches; part B
rates it by the number of distinct trails. Heights strictly rise along every
trail, so the trail graph is acyclic and trails can be counted with memoized
recursion. Impassable tiles ('.') have no height.
"""
from gridwalk.grid.coords import Pos
from gridwalk.grid.grid import Grid, grid_from_str
from gridwalk.search.flood_fill import counted_paths, reachable_states

Height = int | None

trail_end_height = 9


def height_from_char(char: str) -> Height:
    return None if char == "." else int(char)


def topo_map_from_str(text: str) -> Grid[Height]:
    return grid_from_str(text, height_from_char)


def uphill_neighbors(topo_map: Grid[Height], pos: Pos) -> list[Pos]:
    height = topo_map[pos]
    if height is None:
        return []

    return [
        neighbor_pos
        for _, neighbor_pos in topo_map.neighbors(pos)
        if topo_map[neighbor_pos] == height + 1
    ]


def trailheads(topo_map: Grid[Height]) -> list[Pos]:
    return topo_map.positions_of(0)


def trailhead_score(topo_map: Grid[Height], trailhead: Pos) -> int:
    """
    >>> topo_map = topo_map_from_str("0123\\n1234\\n8765\\n9876")
    >>> trailhead_score(topo_map, Pos(0, 0))
    1
    """
    reachable = reachable_states(
        [trailhead], lambda pos: uphill_neighbors(topo_map, pos)
    )
    return sum(1 for pos in reachable if topo_map[pos] == trail_end_height)


def trailhead_rating(topo_map: Grid[Height], trailhead: Pos) -> int:
    return counted_paths(
        trailhead,
        lambda pos: uphill_neighbors(topo_map, pos),
        lambda pos: topo_map[pos] == trail_end_height,
    )


def part_a(topo_map: Grid[Height]) -> int:
    return sum(trailhead_score(topo_map, pos) for pos in trailheads(topo_map))


def part_b(topo_map: Grid[Height]) -> int:
    return sum(trailhead_rating(topo_map, pos) for pos in trailheads(topo_map))


def solve(text: str) -> tuple[int, int]:
    topo_map = topo_map_from_str(text)
    return part_a(topo_map), part_b(topo_map)
