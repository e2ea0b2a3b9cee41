"""
Light beams (2023 day 16): a beam enters a contraption of mirrors and splitters;
count the tiles it energizes.

This is reachability, not cost minimization: a beam on a given tile heading a
given way always behaves the same, so each (tile, heading) pair is visited at
most once, which also stops beams looping forever.

Tiles:
    .   empty space, beams pass through
    /   mirror, east <-> north, west <-> south
    \\   mirror, east <-> south, west <-> north
    |   splitter, east/west beams split north and south
    -   splitter, north/south beams split east and west
"""
from typing import Literal, NamedTuple

from tqdm import tqdm

from gridwalk.grid.coords import Direction, Pos, direction_unit_pos
from gridwalk.grid.grid import Grid, grid_from_str
from gridwalk.search.flood_fill import reachable_states

Tile = Literal[".", "/", "\\", "|", "-"]

tiles: list[Tile] = [".", "/", "\\", "|", "-"]


def tile_from_char(char: str) -> Tile:
    if char not in tiles:
        raise ValueError(f"Unknown contraption tile {char!r}.")

    return char  # type: ignore


slash_reflection: dict[Direction, Direction] = {
    "east": "north",
    "north": "east",
    "west": "south",
    "south": "west",
}

backslash_reflection: dict[Direction, Direction] = {
    "east": "south",
    "south": "east",
    "west": "north",
    "north": "west",
}


def scattered_headings(tile: Tile, heading: Direction) -> list[Direction]:
    """
    >>> scattered_headings("|", "east")
    ['north', 'south']
    >>> scattered_headings("/", "south")
    ['west']
    """
    if tile == "/":
        return [slash_reflection[heading]]
    elif tile == "\\":
        return [backslash_reflection[heading]]
    elif tile == "|" and heading in ("east", "west"):
        return ["north", "south"]
    elif tile == "-" and heading in ("north", "south"):
        return ["east", "west"]
    else:
        return [heading]


class BeamState(NamedTuple):
    pos: Pos
    heading: Direction


def next_beam_states(contraption: Grid[Tile], beam: BeamState) -> list[BeamState]:
    return [
        BeamState(next_pos, heading)
        for heading in scattered_headings(contraption[beam.pos], beam.heading)
        if (next_pos := beam.pos + direction_unit_pos[heading]) in contraption
    ]


def energized_tiles(contraption: Grid[Tile], entry: BeamState) -> set[Pos]:
    beam_states = reachable_states(
        [entry], lambda beam: next_beam_states(contraption, beam)
    )
    return {beam.pos for beam in beam_states}


def edge_entries(contraption: Grid[Tile]) -> list[BeamState]:
    """
    Every beam entering the contraption from outside, heading inwards.

    >>> len(edge_entries(contraption_from_str("...\\n...")))
    10
    """
    max_x, max_y = contraption.width - 1, contraption.height - 1
    return (
        [BeamState(Pos(x, 0), "south") for x in range(contraption.width)]
        + [BeamState(Pos(x, max_y), "north") for x in range(contraption.width)]
        + [BeamState(Pos(0, y), "east") for y in range(contraption.height)]
        + [BeamState(Pos(max_x, y), "west") for y in range(contraption.height)]
    )


def contraption_from_str(text: str) -> Grid[Tile]:
    return grid_from_str(text, tile_from_char)


def part_a(contraption: Grid[Tile]) -> int:
    return len(energized_tiles(contraption, BeamState(Pos(0, 0), "east")))


def part_b(contraption: Grid[Tile], show_progressbar: bool = False) -> int:
    entries = edge_entries(contraption)
    if show_progressbar:
        entries = tqdm(entries)

    return max(len(energized_tiles(contraption, entry)) for entry in entries)


def solve(text: str, show_progressbar: bool = False) -> tuple[int, int]:
    contraption = contraption_from_str(text)
    return part_a(contraption), part_b(contraption, show_progressbar)
