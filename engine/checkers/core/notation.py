"""
Square-number notation for draughts moves.

Playable squares are numbered 1-32 (packed index + 1), so black starts on
1-12 and red on 21-32.

Moves:
- Simple move: "9-13" (piece moves from 9 to 13)
- Jump: "9x18" (piece jumps from 9 to 18, capturing the piece between)

A multi-jump is written as one token per jump, since each jump is applied
as a separate move.
"""

from __future__ import annotations
import re

from .bitboard import NUM_SQUARES
from .game import Game
from .move import Move
from .position import Position

MOVE_RE = re.compile(r'^\s*(\d{1,2})\s*([-x])\s*(\d{1,2})\s*$', re.IGNORECASE)


def square_to_number(pos: Position) -> int:
    return pos.index + 1


def number_to_square(number: int) -> Position:
    """Convert a 1-32 square number to a position."""
    if not 1 <= number <= NUM_SQUARES:
        raise ValueError(f"Square number out of range: {number}")
    return Position(number - 1)


def move_to_notation(move: Move) -> str:
    """Format a validated move, e.g. '9-13' or '9x18'."""
    sep = 'x' if move.jump else '-'
    return f"{square_to_number(move.source)}{sep}{square_to_number(move.destination())}"


def parse_move(game: Game, text: str) -> Move:
    """
    Parse notation into the matching legal move in `game`.

    Raises ValueError if the text is malformed or names no legal move.
    """
    match = MOVE_RE.match(text)
    if not match:
        raise ValueError(f"Invalid move format: {text!r}")

    src = number_to_square(int(match.group(1)))
    dst = number_to_square(int(match.group(3)))
    jump = match.group(2).lower() == 'x'

    for move in game.moves():
        if move.source == src and move.destination() == dst and move.jump == jump:
            return move

    raise ValueError(f"Illegal move: {text.strip()}")
