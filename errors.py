from __future__ import annotations


class SudokuError(Exception):
    """Base class for errors raised by the grid model."""


class InvalidFormatError(SudokuError, ValueError):
    """Puzzle input does not have the 9x9 shape."""


class OutOfRangeError(SudokuError, ValueError):
    """A coordinate, cell index or digit is outside its valid domain."""


class NotCustomError(SudokuError):
    """Givens can only be edited on a custom puzzle."""
