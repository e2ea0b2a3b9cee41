"""
Garden regions (2024 day 12): fence every region of same-letter plots.

Part A prices a fence at area * perimeter; part B at area * number of sides.
A region's side count equals its corner count, which we find per plot by
looking at each pair of orthogonal neighbors (and the diagonal between them).
"""
from dataclasses import dataclass

from gridwalk.grid.coords import Direction, Pos, clockwise_direction, direction_unit_pos
from gridwalk.grid.grid import Grid, grid_from_str
from gridwalk.search.flood_fill import connected_regions


@dataclass(frozen=True)
class Region:
    plant: str
    plots: frozenset[Pos]

    @property
    def area(self) -> int:
        return len(self.plots)

    @property
    def perimeter(self) -> int:
        return sum(
            1
            for pos in self.plots
            for unit_pos in direction_unit_pos.values()
            if pos + unit_pos not in self.plots
        )

    def _corner_count(self, pos: Pos, direction: Direction) -> int:
        side_pos = pos + direction_unit_pos[direction]
        other_side_pos = pos + direction_unit_pos[clockwise_direction[direction]]
        diagonal_pos = side_pos + direction_unit_pos[clockwise_direction[direction]]

        side, other_side = side_pos in self.plots, other_side_pos in self.plots
        if not side and not other_side:
            return 1  # Convex.
        elif side and other_side and diagonal_pos not in self.plots:
            return 1  # Concave.
        else:
            return 0

    @property
    def sides(self) -> int:
        """
        >>> Region("A", frozenset({Pos(0, 0), Pos(1, 0), Pos(0, 1)})).sides
        6
        """
        return sum(
            self._corner_count(pos, direction)
            for pos in self.plots
            for direction in direction_unit_pos
        )


def garden_from_str(text: str) -> Grid[str]:
    return grid_from_str(text, str)


def garden_regions(garden: Grid[str]) -> list[Region]:
    return [
        Region(plant=garden[min(plots)], plots=frozenset(plots))
        for plots in connected_regions(garden)
    ]


def part_a(garden: Grid[str]) -> int:
    return sum(region.area * region.perimeter for region in garden_regions(garden))


def part_b(garden: Grid[str]) -> int:
    return sum(region.area * region.sides for region in garden_regions(garden))


def solve(text: str) -> tuple[int, int]:
    garden = garden_from_str(text)
    return part_a(garden), part_b(garden)
