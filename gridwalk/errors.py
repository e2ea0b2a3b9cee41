"""Puzzle error types."""


class PuzzleError(Exception):
    """Any puzzle-related problem."""


class InputParseError(PuzzleError):
    """The puzzle input is malformed and can't be solved."""


class PuzzleLogicError(PuzzleError):
    """The input parsed, but violates a guarantee the puzzle makes."""
