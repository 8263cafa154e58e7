"""Candidate moves: a source square, a direction, and whether it jumps."""

from __future__ import annotations
from dataclasses import dataclass

from .direction import Direction
from .position import Position


@dataclass(frozen=True)
class Move:
    """
    A candidate transition, not yet checked against a position.

    Destination and captured square are derived from the source bitboard,
    so they are only meaningful once Game has validated the move.
    """
    source: Position
    direction: Direction
    jump: bool = False

    @staticmethod
    def candidates(source: Position, jump: bool) -> tuple[Move, ...]:
        """One unfiltered candidate per direction, in generation order."""
        return tuple(Move(source, direction, jump) for direction in Direction)

    def destination(self) -> Position:
        moved = self.direction.apply(self.source.to_bitboard())
        if self.jump:
            moved = self.direction.apply(moved)
        assert moved, f"move leaves the board: {self!r}"
        return next(moved.actives())

    def midpoint(self) -> Position:
        """The square jumped over (holds the captured piece)."""
        assert self.jump, f"not a jump: {self!r}"
        moved = self.direction.apply(self.source.to_bitboard())
        assert moved, f"move leaves the board: {self!r}"
        return next(moved.actives())
