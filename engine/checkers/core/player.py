"""Sides and piece kinds."""

from __future__ import annotations
from enum import Enum


class Side(Enum):
    """The two players. Black moves first, toward increasing packed row."""
    BLACK = 'black'
    RED = 'red'

    @property
    def opponent(self) -> Side:
        return Side.RED if self is Side.BLACK else Side.BLACK

    def __invert__(self) -> Side:
        return self.opponent


class Piece(Enum):
    PONE = 'pone'
    KING = 'king'

    def __invert__(self) -> Piece:
        return Piece.KING if self is Piece.PONE else Piece.PONE
