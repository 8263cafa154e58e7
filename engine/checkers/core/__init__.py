"""Core game logic: bitboards, positions, directions, moves, state, and history."""

from .bitboard import *
from .position import Position
from .direction import Direction
from .player import Side, Piece
from .move import Move
from .game import Game, get_legal_moves, is_legal_move, get_move_count
from .history import History
