from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Sequence, Tuple

from errors import OutOfRangeError

if TYPE_CHECKING:
    from model import Cell

Coordinate = Tuple[int, int]  # (column, row)

SIZE = 9
BOX = 3
EMPTY = 0

ROW = "row"
COLUMN = "column"
BLOCK = "block"
KINDS = (ROW, COLUMN, BLOCK)


def cell_index(column: int, row: int) -> int:
    if not (0 <= column < SIZE and 0 <= row < SIZE):
        raise OutOfRangeError(f"Coordinate ({column}, {row}) is outside the grid.")
    return row * SIZE + column


def coord_of(index: int) -> Coordinate:
    if not 0 <= index < SIZE * SIZE:
        raise OutOfRangeError(f"Cell index {index} is outside 0-80.")
    row, column = divmod(index, SIZE)
    return column, row


def block_of(column: int, row: int) -> int:
    return (row // BOX) * BOX + column // BOX


ALL_COORDINATES: List[Coordinate] = [coord_of(i) for i in range(SIZE * SIZE)]


def row_indices(row: int) -> List[int]:
    return [cell_index(c, row) for c in range(SIZE)]


def column_indices(column: int) -> List[int]:
    return [cell_index(column, r) for r in range(SIZE)]


def block_indices(block: int) -> List[int]:
    if not 0 <= block < SIZE:
        raise OutOfRangeError(f"Block {block} is outside 0-8.")
    x = block % BOX * BOX
    y = block // BOX * BOX
    indices = []
    for dr in range(BOX):
        for dc in range(BOX):
            indices.append(cell_index(x + dc, y + dr))
    return indices


@dataclass(eq=False, frozen=True)
class Region:
    """Nine cells that may not repeat a digit.

    ``board`` is the puzzle's flat cell list; the region only keeps indices
    into it, so cells and regions never own each other.
    """

    board: Sequence["Cell"] = field(repr=False)
    indices: Tuple[int, ...]
    kind: str = ROW
    index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "indices", tuple(self.indices))
        if len(self.indices) != SIZE or len(set(self.indices)) != SIZE:
            raise ValueError(f"A region needs {SIZE} distinct cells.")

    @property
    def cells(self) -> List["Cell"]:
        return [self.board[i] for i in self.indices]

    def values(self) -> List[int]:
        return [self.board[i].value for i in self.indices]

    def has_duplicate(self, digit: int) -> bool:
        if not 1 <= digit <= 9:
            raise OutOfRangeError(f"Digit {digit} is outside 1-9.")
        count = 0
        for i in self.indices:
            if self.board[i].value == digit:
                count += 1
        return count > 1

    def __iter__(self) -> Iterator["Cell"]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, cell: object) -> bool:
        return any(self.board[i] is cell for i in self.indices)


def build_row_regions(board: Sequence["Cell"]) -> Tuple[Region, ...]:
    return tuple(Region(board, row_indices(r), ROW, r) for r in range(SIZE))


def build_col_regions(board: Sequence["Cell"]) -> Tuple[Region, ...]:
    return tuple(Region(board, column_indices(c), COLUMN, c) for c in range(SIZE))


def build_box_regions(board: Sequence["Cell"]) -> Tuple[Region, ...]:
    return tuple(Region(board, block_indices(b), BLOCK, b) for b in range(SIZE))
