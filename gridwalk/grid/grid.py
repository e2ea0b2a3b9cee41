"""
Grid: immutable 2d cell data, parsed from puzzle text.

>>> grid = grid_from_str("#.\\n.#", lambda char: char == "#")
>>> grid.width, grid.height
(2, 2)
>>> grid.get(Pos(1, 1)), grid.get(Pos(2, 1))
(True, None)
>>> list(grid.neighbors(Pos(0, 0)))
[('east', Pos(1, 0)), ('south', Pos(0, 1))]
"""
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from frozendict import frozendict

from gridwalk.errors import InputParseError
from gridwalk.grid.coords import Direction, Pos, direction_unit_pos, directions

Cell = TypeVar("Cell")


@dataclass(frozen=True)
class Grid(Generic[Cell]):
    """
    Fixed-size rectangular grid of cells.

    Cells are stored in a frozendict so whole grids are hashable; simulations
    that transform grids can use them directly as cycle detection keys.
    """

    cells: frozendict[Pos, Cell]
    width: int
    height: int

    def __post_init__(self):
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Grid of size {self.width}x{self.height} "
                + f"has {len(self.cells)} cells."
            )

    def get(self, pos: Pos) -> Cell | None:
        return self.cells.get(pos)

    def __getitem__(self, pos: Pos) -> Cell:
        return self.cells[pos]

    def __contains__(self, pos: object) -> bool:
        return pos in self.cells

    def neighbors(self, pos: Pos) -> Iterator[tuple[Direction, Pos]]:
        for direction in directions:
            neighbor_pos = pos + direction_unit_pos[direction]
            if neighbor_pos in self.cells:
                yield direction, neighbor_pos

    def positions(self) -> Iterator[Pos]:
        """Row-major positions."""
        for y in range(self.height):
            for x in range(self.width):
                yield Pos(x, y)

    def positions_of(self, cell: Cell) -> list[Pos]:
        return [pos for pos in self.positions() if self.cells[pos] == cell]

    def replaced(self, updates: dict[Pos, Cell]) -> "Grid[Cell]":
        """
        >>> grid = grid_from_str("ab", str)
        >>> grid.replaced({Pos(0, 0): "c"}).rows()
        [['c', 'b']]
        """
        if not all(pos in self.cells for pos in updates):
            raise ValueError("Attempted to replace cells outside of the grid.")

        return Grid(
            cells=frozendict({**self.cells, **updates}),
            width=self.width,
            height=self.height,
        )

    def rows(self) -> list[list[Cell]]:
        return [
            [self.cells[Pos(x, y)] for x in range(self.width)]
            for y in range(self.height)
        ]

    def display_str(self, cell_char: Callable[[Cell], str] = str) -> str:
        return "\n".join(
            "".join(cell_char(cell) for cell in row) for row in self.rows()
        )


def _input_lines(text: str) -> list[str]:
    lines = [line.rstrip("\r") for line in text.strip().split("\n")]
    if lines == [""]:
        raise InputParseError("Expected a grid, found empty input.")

    return lines


def grid_from_str(text: str, cell_from_char: Callable[[str], Cell]) -> Grid[Cell]:
    """
    Parse a rectangular character grid, one row per line.

    cell_from_char may raise ValueError or KeyError on unknown characters.

    >>> grid_from_str("12\\n3", int)
    Traceback (most recent call last):
      ...
    gridwalk.errors.InputParseError: Row 1 has width 1, expected 2.

    >>> grid_from_str("1x", int)
    Traceback (most recent call last):
      ...
    gridwalk.errors.InputParseError: Unexpected character 'x' at row 0, column 1.
    """
    lines = _input_lines(text)
    width = len(lines[0])

    cells: dict[Pos, Cell] = {}
    for y, line in enumerate(lines):
        if len(line) != width:
            raise InputParseError(f"Row {y} has width {len(line)}, expected {width}.")

        for x, char in enumerate(line):
            try:
                cells[Pos(x, y)] = cell_from_char(char)
            except (KeyError, ValueError) as e:
                raise InputParseError(
                    f"Unexpected character {char!r} at row {y}, column {x}."
                ) from e

    return Grid(cells=frozendict(cells), width=width, height=len(lines))


def marker_pos(text: str, marker: str) -> Pos:
    """
    Find the single position of a marker character (like a start tile).

    >>> marker_pos("..\\n.S", "S")
    Pos(1, 1)
    >>> marker_pos("S.\\n.S", "S")
    Traceback (most recent call last):
      ...
    gridwalk.errors.InputParseError: Expected exactly one 'S' marker, found 2.
    """
    found = [
        Pos(x, y)
        for y, line in enumerate(_input_lines(text))
        for x, char in enumerate(line)
        if char == marker
    ]
    if len(found) != 1:
        raise InputParseError(
            f"Expected exactly one {marker!r} marker, found {len(found)}."
        )

    return found[0]
