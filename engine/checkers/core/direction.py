"""
Diagonal directions and their bitboard shifts.

A diagonal step changes the packed index by 3, 4 or 5 depending on the row
parity and on which way the step goes. Each direction is therefore two
(mask, shift) pairs: the mask keeps only squares whose step stays on the
board for that sub-case, then the masked halves are shifted and OR'd.

  forward  = toward row 7 (black's advance)
  backward = toward row 0 (red's advance)
  right    = toward graphical x 7
"""

from __future__ import annotations
from enum import Enum

from .bitboard import Bitboard, ROWS
from .player import Side

# Even rows, every column: step +4 lands on the same column of the next row
MASK_FA = Bitboard(0x0F0F0F0F)
# Odd rows except the last
MASK_FB = Bitboard(0x00F0F0F0)
# Odd rows except the last, columns 1-3: step +3
MASK_FC = Bitboard(0x00E0E0E0)
# Even rows, columns 0-2: step +5
MASK_FD = Bitboard(0x07070707)

MASK_BA = Bitboard(0xF0F0F0F0)
MASK_BB = Bitboard(0x0F0F0F00)
MASK_BC = Bitboard(0x07070700)
MASK_BD = Bitboard(0xE0E0E0E0)


class Direction(Enum):
    """The four diagonal directions, in move generation order."""
    FORWARD_RIGHT = 'forward_right'
    FORWARD_LEFT = 'forward_left'
    BACKWARD_LEFT = 'backward_left'
    BACKWARD_RIGHT = 'backward_right'

    def apply(self, board: Bitboard) -> Bitboard:
        """
        Move every member one diagonal step in this direction.

        Members whose step would leave the board (or wrap into the wrong
        row) are dropped.
        """
        (mask_a, shift_a), (mask_b, shift_b) = SHIFTS[self]
        return (board & mask_a).shift(shift_a) | (board & mask_b).shift(shift_b)

    @property
    def opposite(self) -> Direction:
        return OPPOSITES[self]

    @property
    def delta(self) -> tuple[int, int]:
        """Graphical (dx, dy) of one step."""
        return DELTAS[self]

    @property
    def is_forward(self) -> bool:
        return self in (Direction.FORWARD_RIGHT, Direction.FORWARD_LEFT)

    def valid_for_piece(self, side: Side, is_king: bool) -> bool:
        """Kings go anywhere; pones only toward the opponent's back rank."""
        if is_king:
            return True
        return self.is_forward == (side is Side.BLACK)

    def valid_for_board_edge(self, gx: int, gy: int, steps: int = 1) -> bool:
        """Check that stepping from graphical (gx, gy) stays on the 8x8 grid."""
        dx, dy = self.delta
        x, y = gx + dx * steps, gy + dy * steps
        return 0 <= x < ROWS and 0 <= y < ROWS


SHIFTS: dict[Direction, tuple[tuple[Bitboard, int], tuple[Bitboard, int]]] = {
    Direction.FORWARD_RIGHT: ((MASK_FA, 4), (MASK_FC, 3)),
    Direction.FORWARD_LEFT: ((MASK_FB, 4), (MASK_FD, 5)),
    Direction.BACKWARD_LEFT: ((MASK_BA, -4), (MASK_BC, -3)),
    Direction.BACKWARD_RIGHT: ((MASK_BB, -4), (MASK_BD, -5)),
}

OPPOSITES = {
    Direction.FORWARD_RIGHT: Direction.BACKWARD_LEFT,
    Direction.FORWARD_LEFT: Direction.BACKWARD_RIGHT,
    Direction.BACKWARD_LEFT: Direction.FORWARD_RIGHT,
    Direction.BACKWARD_RIGHT: Direction.FORWARD_LEFT,
}

# Graphical y grows downward, so forward is dy = -1
DELTAS = {
    Direction.FORWARD_RIGHT: (1, -1),
    Direction.FORWARD_LEFT: (-1, -1),
    Direction.BACKWARD_LEFT: (-1, 1),
    Direction.BACKWARD_RIGHT: (1, 1),
}
