"""
Pipe maze (2023 day 10): a single loop of pipes passes through the start tile S.

Part A is the distance (in steps along the loop) to the point farthest from S.
Part B counts the tiles enclosed by the loop. We scan each row left to right,
flipping "inside" whenever we cross a loop pipe that connects north; pairs of
corners like L-7 then count as one crossing and L-J as none.
"""
from typing import Literal

from gridwalk.errors import InputParseError
from gridwalk.grid.coords import Direction, Pos, direction_unit_pos, opposite_direction
from gridwalk.grid.grid import Grid, grid_from_str, marker_pos
from gridwalk.search.flood_fill import bfs_distances

Pipe = Literal["|", "-", "L", "J", "7", "F", ".", "S"]

pipe_connections: dict[Pipe, frozenset[Direction]] = {
    "|": frozenset({"north", "south"}),
    "-": frozenset({"east", "west"}),
    "L": frozenset({"north", "east"}),
    "J": frozenset({"north", "west"}),
    "7": frozenset({"south", "west"}),
    "F": frozenset({"south", "east"}),
    ".": frozenset(),
    "S": frozenset(),
}

pipe_by_connections: dict[frozenset[Direction], Pipe] = {
    connections: pipe
    for pipe, connections in pipe_connections.items()
    if len(connections) == 2
}


def pipe_from_char(char: str) -> Pipe:
    if char not in pipe_connections:
        raise ValueError(f"Unknown pipe {char!r}.")

    return char  # type: ignore


def pipes_from_str(text: str) -> tuple[Grid[Pipe], Pos]:
    """
    Parse the maze, replacing S with the pipe shape it must have.

    >>> pipes, start_pos = pipes_from_str(".....\\n.S-7.\\n.|.|.\\n.L-J.\\n.....")
    >>> start_pos, pipes[start_pos]
    (Pos(1, 1), 'F')
    """
    pipes = grid_from_str(text, pipe_from_char)
    start_pos = marker_pos(text, "S")

    start_connections = frozenset(
        direction
        for direction, neighbor_pos in pipes.neighbors(start_pos)
        if opposite_direction[direction] in pipe_connections[pipes[neighbor_pos]]
    )
    if start_connections not in pipe_by_connections:
        raise InputParseError(
            f"Start tile at {start_pos} connects to {len(start_connections)} "
            + "pipes, expected exactly 2."
        )

    start_pipe = pipe_by_connections[start_connections]
    return pipes.replaced({start_pos: start_pipe}), start_pos


def connected_pipes(pipes: Grid[Pipe], pos: Pos) -> list[Pos]:
    return [
        neighbor_pos
        for direction in sorted(pipe_connections[pipes[pos]])
        if (neighbor_pos := pos + direction_unit_pos[direction]) in pipes
        and opposite_direction[direction] in pipe_connections[pipes[neighbor_pos]]
    ]


def loop_distances(pipes: Grid[Pipe], start_pos: Pos) -> dict[Pos, int]:
    return bfs_distances([start_pos], lambda pos: connected_pipes(pipes, pos))


def enclosed_tiles(pipes: Grid[Pipe], loop: set[Pos]) -> set[Pos]:
    enclosed = set()
    for y in range(pipes.height):
        inside = False
        for x in range(pipes.width):
            pos = Pos(x, y)
            if pos in loop:
                if "north" in pipe_connections[pipes[pos]]:
                    inside = not inside
            elif inside:
                enclosed.add(pos)

    return enclosed


def solve(text: str) -> tuple[int, int]:
    pipes, start_pos = pipes_from_str(text)
    distances = loop_distances(pipes, start_pos)
    return max(distances.values()), len(enclosed_tiles(pipes, set(distances)))
