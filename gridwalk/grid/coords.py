"""
Simple 2d coordinate and compass direction library.

Grids are indexed with x growing east and y growing south, so the first line
of a puzzle input is y=0.

Example usages:
>>> Pos(2, 3) + direction_unit_pos["north"]
Pos(2, 2)

>>> (Pos(4, 1) - Pos(1, 5)).l1()
7

>>> direction_rotated("north", 1), direction_rotated("north", -1)
('east', 'west')
"""
from typing import Literal, NamedTuple, cast

Direction = Literal["north", "east", "south", "west"]


# Ordered by clockwise rotation.
directions: list[Direction] = ["north", "east", "south", "west"]


class Pos(NamedTuple):
    x: int
    y: int

    def __add__(self, other) -> "Pos":  # type: ignore[override]
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other) -> "Pos":
        return Pos(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Pos":
        return Pos(-self.x, -self.y)

    def __mul__(self, value) -> "Pos":  # type: ignore[override]
        """
        >>> Pos(2, -3) * 2
        Pos(4, -6)
        """
        if not isinstance(value, int):
            return NotImplemented

        return Pos(self.x * value, self.y * value)

    def l1(self) -> int:
        return abs(self.x) + abs(self.y)

    def __str__(self) -> str:
        return f"Pos({self.x}, {self.y})"

    def __repr__(self) -> str:
        return str(self)


direction_unit_pos: dict[Direction, Pos] = {
    "north": Pos(0, -1),
    "east": Pos(1, 0),
    "south": Pos(0, 1),
    "west": Pos(-1, 0),
}


opposite_direction: dict[Direction, Direction] = {
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
}

clockwise_direction: dict[Direction, Direction] = {
    "north": "east",
    "east": "south",
    "south": "west",
    "west": "north",
}

counterclockwise_direction: dict[Direction, Direction] = {
    direction: rotated for rotated, direction in clockwise_direction.items()
}


def direction_rotated(direction: Direction, quarter_turns: int = 1) -> Direction:
    """
    Rotate clockwise by quarter_turns; negative values rotate counterclockwise.

    >>> direction_rotated("west", 2)
    'east'
    >>> direction_rotated("south", -3)
    'west'
    """
    return cast(
        Direction,
        directions[(directions.index(direction) + quarter_turns) % len(directions)],
    )
