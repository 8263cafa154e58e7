"""
Square addressing.

A Position wraps a packed square index and converts to and from the
graphical 8x8 grid used by rendering surfaces (gx to the right, gy down,
light squares omitted).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .bitboard import ROWS, COLUMNS, NUM_SQUARES, PROMOTION_MASK, Bitboard, bit


@dataclass(frozen=True, order=True)
class Position:
    """A playable square, identified by its packed index (0-31)."""
    index: int

    def __post_init__(self) -> None:
        assert 0 <= self.index < NUM_SQUARES, f"square out of range: {self.index}"

    @classmethod
    def from_packed(cls, index: int) -> Position:
        return cls(index)

    @classmethod
    def from_row_column(cls, row: int, column: int) -> Position:
        """Build from packed row (0-7) and column (0-3)."""
        assert 0 <= row < ROWS, f"row out of range: {row}"
        assert 0 <= column < COLUMNS, f"column out of range: {column}"
        return cls((row << 2) + column)

    @classmethod
    def from_graphical(cls, gx: int, gy: int) -> Optional[Position]:
        """
        Convert a graphical coordinate to a position.

        Returns None for light squares, i.e. when gx + gy is even.
        """
        assert 0 <= gx < ROWS and 0 <= gy < ROWS, f"off board: ({gx}, {gy})"
        if (gx + gy) % 2 == 0:
            return None
        return cls.from_row_column(7 - gy, (7 - gx) // 2)

    @property
    def packed_row(self) -> int:
        return self.index >> 2

    @property
    def packed_column(self) -> int:
        return self.index & 0x3

    @property
    def graphical_x(self) -> int:
        return 7 - ((self.packed_column << 1) + (1 - self.packed_row % 2))

    @property
    def graphical_y(self) -> int:
        return 7 - self.packed_row

    def to_graphical(self) -> tuple[int, int]:
        return self.graphical_x, self.graphical_y

    def to_bitboard(self) -> Bitboard:
        return Bitboard(bit(self.index))

    def is_member(self, board: Bitboard) -> bool:
        return bool(board.bits & bit(self.index))

    @property
    def in_promotion_zone(self) -> bool:
        """True on the first or last packed row."""
        return bool(PROMOTION_MASK & bit(self.index))

    def __repr__(self) -> str:
        return f"Position({self.index})"
