"""
Bitboard utilities for English draughts.

Only the 32 dark squares are playable, packed four per row
(8 rows x 4 columns = 32 squares, fits in a 32-bit int). As drawn on
the graphical 8x8 board, black at the bottom:

  row 7 |  . 31  . 30  . 29  . 28     <- red back rank
  row 6 | 27  . 26  . 25  . 24  .
  row 5 |  . 23  . 22  . 21  . 20
  row 4 | 19  . 18  . 17  . 16  .
  row 3 |  . 15  . 14  . 13  . 12
  row 2 | 11  . 10  .  9  .  8  .
  row 1 |  .  7  .  6  .  5  .  4
  row 0 |  3  .  2  .  1  .  0  .     <- black back rank
          gx 0 ...                7

Square index = (row << 2) + column. Odd rows sit one square to the right
of even rows, which is why a diagonal step is a shift by 3, 4 or 5
depending on the row parity (see direction.py).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

if TYPE_CHECKING:
    from .position import Position

# Board dimensions
ROWS = 8
COLUMNS = 4
NUM_SQUARES = ROWS * COLUMNS  # 32

# Mask for valid squares (bits 0-31)
FULL_MASK = (1 << NUM_SQUARES) - 1

# Starting positions: black on rows 0-2, red on rows 5-7
BLACK_START = 0x00000FFF
RED_START = 0xFFF00000

# Back ranks (a pone arriving here is promoted)
FIRST_ROW_MASK = 0x0000000F
LAST_ROW_MASK = FIRST_ROW_MASK << ((ROWS - 1) * COLUMNS)
PROMOTION_MASK = FIRST_ROW_MASK | LAST_ROW_MASK


def bit(sq: int) -> int:
    """Return bitboard with single bit set at square."""
    return 1 << sq


def popcount(bb: int) -> int:
    """Count number of set bits."""
    return bin(int(bb)).count('1')


def lsb(bb: int) -> int:
    """Return index of least significant bit (or -1 if empty)."""
    bb = int(bb)  # Handle numpy integers
    if bb == 0:
        return -1
    return (bb & -bb).bit_length() - 1


def iter_bits(bb: int) -> Iterator[int]:
    """Iterate over indices of set bits, lowest first."""
    bb = int(bb)  # Handle numpy integers
    while bb:
        sq = lsb(bb)
        yield sq
        bb &= bb - 1  # Clear LSB


def bb_to_squares(bb: int) -> list[int]:
    """Convert bitboard to list of square indices."""
    return list(iter_bits(bb))


@dataclass(frozen=True)
class Bitboard:
    """
    Immutable set of playable squares backed by a 32-bit integer.

    Supports the usual set algebra through the bitwise operators. Shifts
    drop anything pushed past bit 31, and NOT never sets bits above it.
    """
    bits: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, 'bits', int(self.bits) & FULL_MASK)

    @classmethod
    def empty(cls) -> Bitboard:
        return cls(0)

    @classmethod
    def full(cls) -> Bitboard:
        return cls(FULL_MASK)

    def __and__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits & other.bits)

    def __or__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits | other.bits)

    def __xor__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits ^ other.bits)

    def __invert__(self) -> Bitboard:
        return Bitboard(~self.bits)

    def __lshift__(self, n: int) -> Bitboard:
        return self.shift(n)

    def __rshift__(self, n: int) -> Bitboard:
        return self.shift(-n)

    def shift(self, n: int) -> Bitboard:
        """Shift by a signed amount: positive moves bits up, negative down."""
        if n >= 0:
            return Bitboard(self.bits << n)
        return Bitboard(self.bits >> -n)

    def __bool__(self) -> bool:
        return self.bits != 0

    def __int__(self) -> int:
        return self.bits

    def is_empty(self) -> bool:
        return self.bits == 0

    def count(self) -> int:
        """Number of member squares."""
        return popcount(self.bits)

    def squares(self) -> Iterator[int]:
        """Lazily yield member square indices in ascending order."""
        return iter_bits(self.bits)

    def actives(self) -> Iterator[Position]:
        """Lazily yield member squares as positions in ascending order."""
        from .position import Position
        for sq in iter_bits(self.bits):
            yield Position(sq)

    def to_grid(self) -> np.ndarray:
        """
        Convert to an (8, 8) bool array indexed [gy, gx] in graphical space.

        Light squares are always False.
        """
        grid = np.zeros((ROWS, ROWS), dtype=bool)
        for pos in self.actives():
            grid[pos.graphical_y, pos.graphical_x] = True
        return grid

    def __repr__(self) -> str:
        return f"Bitboard(0x{self.bits:08X})"
