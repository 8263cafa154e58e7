"""
Game state representation and rules for English draughts.

Uses bitboards for move generation and successor computation. A Game is an
immutable snapshot; apply() returns a new one.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Iterator, Optional

import numpy as np

from .bitboard import ROWS, BLACK_START, RED_START, Bitboard
from .direction import Direction
from .move import Move
from .player import Piece, Side
from .position import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Game:
    """
    Represents the complete state of a draughts game.

    Attributes:
        side: Player to move
        jumping: Piece that must keep jumping this turn, or None
        black: Bitboard of black's pieces
        red: Bitboard of red's pieces
        king: Bitboard of promoted pieces (either colour)
    """
    side: Side = Side.BLACK
    jumping: Optional[Position] = None
    black: Bitboard = field(default_factory=lambda: Bitboard(BLACK_START))
    red: Bitboard = field(default_factory=lambda: Bitboard(RED_START))
    king: Bitboard = field(default_factory=Bitboard.empty)

    def __post_init__(self) -> None:
        assert not (self.black & self.red), "black and red overlap"
        assert not (self.king & ~(self.black | self.red)), "king on empty square"

    @classmethod
    def new_game(cls) -> Game:
        """Create a new game in the starting position, black to move."""
        return cls()

    def pieces(self, side: Side) -> Bitboard:
        return self.black if side is Side.BLACK else self.red

    @property
    def occupied(self) -> Bitboard:
        return self.black | self.red

    def gaps(self) -> Bitboard:
        """Bitboard of all empty playable squares."""
        return ~self.occupied

    def _eligible(self, side: Side, direction: Direction) -> Bitboard:
        # Pieces of `side` allowed to step in `direction`
        pieces = self.pieces(side)
        if direction.valid_for_piece(side, is_king=False):
            return pieces
        return pieces & self.king

    def movables(self, side: Optional[Side] = None) -> Bitboard:
        """Pieces with an empty square diagonally ahead in a legal direction."""
        side = self.side if side is None else side
        gaps = self.gaps()
        movable = Bitboard.empty()
        for direction in Direction:
            movable |= self._eligible(side, direction) & direction.opposite.apply(gaps)
        return movable

    def jumpables(self, side: Optional[Side] = None) -> Bitboard:
        """Pieces next to an opponent piece with an empty square behind it."""
        side = self.side if side is None else side
        gaps = self.gaps()
        opponent = self.pieces(~side)
        jumpable = Bitboard.empty()
        for direction in Direction:
            back = direction.opposite
            landing = opponent & back.apply(gaps)
            jumpable |= self._eligible(side, direction) & back.apply(landing)
        return jumpable

    def is_legal(self, move: Move) -> bool:
        """Full validation of a candidate against this position."""
        src = move.source
        if not src.is_member(self.pieces(self.side)):
            return False
        if not move.direction.valid_for_piece(self.side, src.is_member(self.king)):
            return False
        steps = 2 if move.jump else 1
        if not move.direction.valid_for_board_edge(src.graphical_x, src.graphical_y, steps):
            return False

        gaps = self.gaps()
        one = move.direction.apply(src.to_bitboard())
        if not move.jump:
            return bool(one & gaps)
        two = move.direction.apply(one)
        return bool(one & self.pieces(~self.side)) and bool(two & gaps)

    def moves(self) -> Iterator[Move]:
        """
        Lazily generate legal moves for the side to move.

        Rules, in precedence order:
        1. If any jump exists, only jumps are legal
        2. Mid multi-jump, only the jumping piece may move, and only by
           jumping; if it cannot, nothing is legal
        3. Otherwise simple moves

        Moves come out by ascending source square, then direction order.
        """
        jumpable = self.jumpables()
        if self.jumping is not None:
            sources, jump = jumpable & self.jumping.to_bitboard(), True
        elif jumpable:
            sources, jump = jumpable, True
        else:
            sources, jump = self.movables(), False

        for src in sources.actives():
            for move in Move.candidates(src, jump):
                if self.is_legal(move):
                    yield move

    def has_moves(self) -> bool:
        return next(self.moves(), None) is not None

    def apply(self, move: Move) -> Game:
        """
        Return the position after `move`, which must come from moves().

        A jump keeps the turn with the jumping piece; a simple move passes
        it. If the side left to move then has nothing legal, the turn flips
        once more.
        """
        side = self.side
        assert move.source.is_member(self.pieces(side)), f"no {side.value} piece at {move.source!r}"

        src = move.source.to_bitboard()
        dst_pos = move.destination()
        dst = dst_pos.to_bitboard()

        was_king = move.source.is_member(self.king)
        own = (self.pieces(side) & ~src) | dst
        opponent = self.pieces(~side)
        king = self.king & ~src
        if was_king or dst_pos.in_promotion_zone:
            if not was_king:
                logger.debug("%s promotes at %d", side.value, dst_pos.index)
            king |= dst

        if move.jump:
            mid = move.midpoint()
            logger.debug("%s captures at %d", side.value, mid.index)
            captured = mid.to_bitboard()
            opponent &= ~captured
            king &= ~captured
            next_side, jumping = side, dst_pos
        else:
            next_side, jumping = ~side, None

        black, red = (own, opponent) if side is Side.BLACK else (opponent, own)
        result = replace(self, side=next_side, jumping=jumping, black=black, red=red, king=king)

        if not result.has_moves():
            logger.debug("%s has no legal moves, turn passes to %s",
                         result.side.value, (~result.side).value)
            result = replace(result, side=~result.side, jumping=None)
        return result

    def winner(self) -> Optional[Side]:
        """
        Return the side whose opponent has no pieces left, or None.

        A side that still has pieces but no legal move is not treated as
        having lost.
        """
        if not self.black:
            return Side.RED
        if not self.red:
            return Side.BLACK
        return None

    def is_terminal(self) -> bool:
        return self.winner() is not None

    def piece_at(self, pos: Position) -> Optional[tuple[Side, Piece]]:
        if pos.is_member(self.black):
            side = Side.BLACK
        elif pos.is_member(self.red):
            side = Side.RED
        else:
            return None
        return side, Piece.KING if pos.is_member(self.king) else Piece.PONE

    def to_array(self) -> np.ndarray:
        """
        Convert to an (8, 8) int8 array indexed [gy, gx].

        Black pieces are positive, red negative; kings have magnitude 2.
        """
        grid = self.black.to_grid().astype(np.int8) - self.red.to_grid().astype(np.int8)
        grid[self.king.to_grid()] *= 2
        return grid

    def __str__(self) -> str:
        """Board diagram, black at the bottom."""
        symbols = {
            (Side.BLACK, Piece.PONE): 'b',
            (Side.BLACK, Piece.KING): 'B',
            (Side.RED, Piece.PONE): 'r',
            (Side.RED, Piece.KING): 'R',
        }
        lines = []
        for gy in range(ROWS):
            row = []
            for gx in range(ROWS):
                pos = Position.from_graphical(gx, gy)
                if pos is None:
                    row.append(' ')
                    continue
                piece = self.piece_at(pos)
                row.append(symbols[piece] if piece else '.')
            lines.append(' '.join(row))

        status = f"{self.side.value.capitalize()} to move"
        if self.jumping is not None:
            status += f" (continuing jump from {self.jumping.index + 1})"
        lines.append(status)
        return '\n'.join(lines)


# Convenience functions
def get_legal_moves(game: Game) -> list[Move]:
    """Get all legal moves for the side to move."""
    return list(game.moves())


def is_legal_move(game: Game, move: Move) -> bool:
    """Check if a move is legal."""
    return move in get_legal_moves(game)


def get_move_count(game: Game) -> int:
    """Get number of legal moves."""
    return len(get_legal_moves(game))
