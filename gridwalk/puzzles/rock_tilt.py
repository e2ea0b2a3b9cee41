"""
Parabolic reflector dish (2023 day 14): tilt a platform so round rocks (O) roll
until they hit a cube rock (#), another round rock, or the edge.

Part A measures the north support beam load after one north tilt. Part B runs
a billion spin cycles (north, west, south, east); the platform falls into a
loop quickly, so we detect the cycle and skip ahead.

Tilts are pure grid -> grid transforms; grids are hashable, so whole
platforms serve as cycle detection keys.
"""
from typing import Literal

from frozendict import frozendict

from gridwalk.grid.coords import Direction, direction_unit_pos
from gridwalk.grid.grid import Grid, grid_from_str
from gridwalk.search.cycles import iterated_state

Rock = Literal["O", "#", "."]

spin_cycle_directions: list[Direction] = ["north", "west", "south", "east"]
part_b_spin_cycles = 1_000_000_000


def rock_from_char(char: str) -> Rock:
    if char not in ("O", "#", "."):
        raise ValueError(f"Unknown platform tile {char!r}.")

    return char  # type: ignore


def platform_from_str(text: str) -> Grid[Rock]:
    return grid_from_str(text, rock_from_char)


def tilted(platform: Grid[Rock], direction: Direction) -> Grid[Rock]:
    """
    >>> print(tilted(platform_from_str("O.#.O\\n.O..O"), "east").display_str())
    .O#.O
    ...OO
    """
    unit_pos = direction_unit_pos[direction]
    cells = dict(platform.cells)

    # Rocks nearest the far edge settle first.
    for pos in sorted(
        platform.positions(),
        key=lambda pos: -(pos.x * unit_pos.x + pos.y * unit_pos.y),
    ):
        if cells[pos] != "O":
            continue

        rest_pos = pos
        while cells.get(next_pos := rest_pos + unit_pos) == ".":
            rest_pos = next_pos

        cells[pos] = "."
        cells[rest_pos] = "O"

    return Grid(cells=frozendict(cells), width=platform.width, height=platform.height)


def spin_cycled(platform: Grid[Rock]) -> Grid[Rock]:
    for direction in spin_cycle_directions:
        platform = tilted(platform, direction)

    return platform


def north_load(platform: Grid[Rock]) -> int:
    return sum(platform.height - pos.y for pos in platform.positions_of("O"))


def part_a(platform: Grid[Rock]) -> int:
    return north_load(tilted(platform, "north"))


def part_b(platform: Grid[Rock], spin_cycles: int = part_b_spin_cycles) -> int:
    return north_load(iterated_state(platform, spin_cycled, spin_cycles))


def solve(text: str) -> tuple[int, int]:
    platform = platform_from_str(text)
    return part_a(platform), part_b(platform)
