"""Tests for move candidates and derived squares."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.direction import Direction
from checkers.core.move import Move
from checkers.core.position import Position


class TestCandidates:
    def test_one_per_direction(self):
        cands = Move.candidates(Position(14), jump=False)
        assert len(cands) == 4
        assert [m.direction for m in cands] == list(Direction)
        assert all(m.source == Position(14) for m in cands)
        assert not any(m.jump for m in cands)

    def test_jump_flag_propagates(self):
        assert all(m.jump for m in Move.candidates(Position(0), jump=True))

    def test_unfiltered_on_edge(self):
        # Square 0 has only one real neighbour per side, still four candidates
        assert len(Move.candidates(Position(0), jump=False)) == 4


class TestDestination:
    def test_simple_move(self):
        assert Move(Position(8), Direction.FORWARD_RIGHT).destination() == Position(12)
        assert Move(Position(8), Direction.FORWARD_LEFT).destination() == Position(13)

    def test_jump_goes_two_steps(self):
        move = Move(Position(9), Direction.FORWARD_RIGHT, jump=True)
        assert move.midpoint() == Position(13)
        assert move.destination() == Position(16)

    def test_backward_jump(self):
        move = Move(Position(18), Direction.BACKWARD_RIGHT, jump=True)
        assert move.midpoint() == Position(14)
        assert move.destination() == Position(9)

    def test_off_board_is_programmer_error(self):
        with pytest.raises(AssertionError):
            Move(Position(4), Direction.FORWARD_RIGHT).destination()

    def test_midpoint_requires_jump(self):
        with pytest.raises(AssertionError):
            Move(Position(8), Direction.FORWARD_RIGHT).midpoint()


class TestValueSemantics:
    def test_equality_and_hash(self):
        a = Move(Position(8), Direction.FORWARD_RIGHT)
        b = Move(Position(8), Direction.FORWARD_RIGHT, jump=False)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Move(Position(8), Direction.FORWARD_RIGHT, jump=True)
