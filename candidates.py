from __future__ import annotations

from typing import Iterator, List

from errors import OutOfRangeError

# Candidates are 10-bit masks; bit d set means digit d is possible. Bit 0 is unused.
DIGITS = list(range(1, 10))
ALL_MASK = 0b11_1111_1110


def digit_to_mask(d: int) -> int:
    if isinstance(d, bool) or not isinstance(d, int) or not 1 <= d <= 9:
        raise OutOfRangeError(f"Digit {d} is outside 1-9.")
    return 1 << d


def mask_to_digits(mask: int) -> List[int]:
    return [d for d in DIGITS if mask & (1 << d)]


class Candidates:
    """Set of digits still possible for an empty cell."""

    __slots__ = ("_mask",)

    def __init__(self, mask: int = 0) -> None:
        self._mask = mask & ALL_MASK

    @classmethod
    def full(cls) -> "Candidates":
        return cls(ALL_MASK)

    @property
    def mask(self) -> int:
        return self._mask

    def add(self, d: int) -> None:
        self._mask |= digit_to_mask(d)

    def discard(self, d: int) -> None:
        self._mask &= ~digit_to_mask(d)

    def fill(self) -> None:
        self._mask = ALL_MASK

    def clear(self) -> None:
        self._mask = 0

    def copy(self) -> "Candidates":
        return Candidates(self._mask)

    def __contains__(self, d: object) -> bool:
        if isinstance(d, bool) or not isinstance(d, int) or not 1 <= d <= 9:
            return False
        return bool(self._mask & (1 << d))

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __iter__(self) -> Iterator[int]:
        return iter(mask_to_digits(self._mask))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Candidates):
            return self._mask == other._mask
        if isinstance(other, (set, frozenset)):
            return set(self) == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Candidates({mask_to_digits(self._mask)})"
