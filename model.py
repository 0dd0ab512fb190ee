from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from candidates import Candidates
from constraints import (
    BOX,
    EMPTY,
    SIZE,
    Coordinate,
    Region,
    block_of,
    build_box_regions,
    build_col_regions,
    build_row_regions,
    cell_index,
    coord_of,
)
from errors import InvalidFormatError, NotCustomError, OutOfRangeError

log = logging.getLogger(__name__)

Grid = List[List[int]]

# Offsets of each kind in Puzzle's flat region list.
_ROW_BASE = 0
_COLUMN_BASE = SIZE
_BLOCK_BASE = SIZE * 2

_RULE = "—" * 13
_BAR = "┃"


def _check_value(value: int) -> int:
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not (value == EMPTY or 1 <= value <= 9)
    ):
        raise OutOfRangeError(f"Value {value!r} is not empty or a digit 1-9.")
    return value


class Cell:
    def __init__(self, puzzle: "Puzzle", value: int, position: Coordinate) -> None:
        self._puzzle = puzzle
        self._position = position
        self._index = cell_index(*position)
        self._original_value = _check_value(value)
        self._value = value
        self.candidates = Candidates()
        self._region_ids: Tuple[int, ...] = ()
        self._peer_ids: Tuple[int, ...] = ()

    @property
    def position(self) -> Coordinate:
        return self._position

    @property
    def column(self) -> int:
        return self._position[0]

    @property
    def row(self) -> int:
        return self._position[1]

    @property
    def index(self) -> int:
        return self._index

    @property
    def block(self) -> int:
        return block_of(*self._position)

    @property
    def value(self) -> int:
        return self._value

    @property
    def original_value(self) -> int:
        return self._original_value

    @property
    def is_given(self) -> bool:
        return self._original_value != EMPTY

    @property
    def is_empty(self) -> bool:
        return self.value == EMPTY

    def init_regions(self) -> None:
        self._region_ids = (
            _ROW_BASE + self.row,
            _COLUMN_BASE + self.column,
            _BLOCK_BASE + self.block,
        )

    def init_visible_cells(self) -> None:
        seen = set()
        for region in self.regions:
            seen.update(region.indices)
        seen.discard(self._index)
        self._peer_ids = tuple(sorted(seen))

    @property
    def regions(self) -> Tuple[Region, ...]:
        all_regions = self._puzzle._regions
        return tuple(all_regions[i] for i in self._region_ids)

    @property
    def row_region(self) -> Region:
        return self._puzzle._regions[self._region_ids[0]]

    @property
    def column_region(self) -> Region:
        return self._puzzle._regions[self._region_ids[1]]

    @property
    def block_region(self) -> Region:
        return self._puzzle._regions[self._region_ids[2]]

    @property
    def peers(self) -> List["Cell"]:
        board = self._puzzle.cells
        return [board[i] for i in self._peer_ids]

    def can_see(self, other: "Cell") -> bool:
        return other._index in self._peer_ids and other._puzzle is self._puzzle

    def set_value(self, value: int) -> None:
        """Place ``value`` in this cell.

        A digit is removed from the candidates of every empty peer. Clearing
        the cell restores nothing; call ``Puzzle.refresh_candidates`` for that.
        """
        self._value = _check_value(value)
        if value == EMPTY:
            return
        self.candidates.clear()
        board = self._puzzle.cells
        for i in self._peer_ids:
            peer = board[i]
            if peer.value == EMPTY:
                peer.candidates.discard(value)

    def change_original_value(self, value: int) -> None:
        if not self._puzzle.is_custom:
            raise NotCustomError("Givens of a parsed puzzle cannot be changed.")
        self._original_value = _check_value(value)
        self.set_value(value)

    def __repr__(self) -> str:
        return f"Cell(r{self.row + 1}c{self.column + 1}={self.value})"


class Puzzle:
    def __init__(self, board: Sequence[Sequence[int]], is_custom: bool) -> None:
        if len(board) != SIZE or any(len(row) != SIZE for row in board):
            raise InvalidFormatError("Board must be 9x9.")
        self.is_custom = is_custom

        self.cells: List[Cell] = [
            Cell(self, board[row][col], (col, row))
            for row in range(SIZE)
            for col in range(SIZE)
        ]

        self.rows = build_row_regions(self.cells)
        self.columns = build_col_regions(self.cells)
        self.blocks = build_box_regions(self.cells)
        self.regions = (self.rows, self.columns, self.blocks)
        self._regions: Tuple[Region, ...] = self.rows + self.columns + self.blocks

        # Every cell needs its regions before any peer set is computed.
        for cell in self.cells:
            cell.init_regions()
        for cell in self.cells:
            cell.init_visible_cells()

        self.refresh_candidates()
        log.debug(
            "built %s puzzle with %d givens",
            "custom" if is_custom else "parsed",
            sum(1 for c in self.cells if c.is_given),
        )

    def __getitem__(self, key: Coordinate) -> Cell:
        column, row = key
        return self.cells[cell_index(column, row)]

    def cell_at(self, index: int) -> Cell:
        coord_of(index)
        return self.cells[index]

    def refresh_candidates(self) -> None:
        for cell in self.cells:
            cell.candidates.fill()
        for cell in self.cells:
            if cell.value != EMPTY:
                cell.set_value(cell.value)
        log.debug("candidates refreshed")

    @classmethod
    def create_custom(cls) -> "Puzzle":
        return cls([[EMPTY] * SIZE for _ in range(SIZE)], True)

    @classmethod
    def parse(cls, rows: Sequence[str]) -> "Puzzle":
        if len(rows) != SIZE:
            raise InvalidFormatError(
                f"Puzzle must have {SIZE} rows, got {len(rows)}."
            )
        board: Grid = []
        for r, line in enumerate(rows):
            if len(line) != SIZE:
                raise InvalidFormatError(
                    f"Row {r} must have {SIZE} values, got {len(line)}."
                )
            # Anything other than 1-9 stands for an empty cell.
            board.append([int(ch) if ch in "123456789" else EMPTY for ch in line])
        return cls(board, False)

    @classmethod
    def parse_text(cls, text: str) -> "Puzzle":
        # Spaces are a valid blank notation, so only zero-length lines are dropped.
        return cls.parse([line for line in text.splitlines() if line])

    def reset(self) -> None:
        """Empty every non-given cell and put overwritten givens back."""
        cleared = 0
        for cell in self.cells:
            if cell.value != cell.original_value:
                # EMPTY for non-givens, the clue otherwise.
                cell.set_value(cell.original_value)
                cleared += 1
        log.debug("reset cleared %d cells", cleared)

    def check_for_errors(self) -> bool:
        """Return True if any digit repeats in a row, column or block.

        Safe to call on a partially filled grid.
        """
        for digit in range(1, 10):
            for i in range(SIZE):
                if (
                    self.blocks[i].has_duplicate(digit)
                    or self.rows[i].has_duplicate(digit)
                    or self.columns[i].has_duplicate(digit)
                ):
                    return True
        return False

    def is_solved(self) -> bool:
        return all(c.value != EMPTY for c in self.cells) and not self.check_for_errors()

    def copy(self) -> "Puzzle":
        clone = Puzzle(self.original_grid(), self.is_custom)
        for mine, theirs in zip(self.cells, clone.cells):
            theirs._value = mine.value
            theirs.candidates = mine.candidates.copy()
        return clone

    def copy_grid(self) -> Grid:
        return [[self[c, r].value for c in range(SIZE)] for r in range(SIZE)]

    def original_grid(self) -> Grid:
        return [[self[c, r].original_value for c in range(SIZE)] for r in range(SIZE)]

    def to_string(self) -> str:
        lines = []
        for row in self.original_grid():
            lines.append("".join(str(v) if v != EMPTY else "-" for v in row))
        return "\n".join(lines)

    def to_string_fancy(self) -> str:
        lines = []
        for r, row in enumerate(self.copy_grid()):
            if r % BOX == 0:
                lines.append(_RULE)
            line = ""
            for c, v in enumerate(row):
                if c % BOX == 0:
                    line += _BAR
                line += str(v) if v != EMPTY else " "
            lines.append(line + _BAR)
        lines.append(_RULE)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        kind = "custom" if self.is_custom else "parsed"
        return f"Puzzle({kind}, givens={sum(1 for c in self.cells if c.is_given)})"
