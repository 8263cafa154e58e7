"""Tests for diagonal directions and their masked shifts."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.bitboard import Bitboard, BLACK_START, FULL_MASK
from checkers.core.direction import Direction
from checkers.core.player import Side
from checkers.core.position import Position


def reference_step(pos: Position, direction: Direction) -> Bitboard:
    """One diagonal step computed on the graphical grid."""
    dx, dy = direction.delta
    gx, gy = pos.graphical_x + dx, pos.graphical_y + dy
    if not (0 <= gx < 8 and 0 <= gy < 8):
        return Bitboard.empty()
    return Position.from_graphical(gx, gy).to_bitboard()


class TestApply:
    @pytest.mark.parametrize("direction", list(Direction))
    def test_matches_graphical_reference(self, direction):
        for index in range(32):
            pos = Position(index)
            assert direction.apply(pos.to_bitboard()) == reference_step(pos, direction), \
                f"{direction} from {index}"

    @pytest.mark.parametrize("direction", list(Direction))
    def test_whole_board_is_union_of_single_steps(self, direction):
        board = Bitboard(0xA5C3_5A3C)
        expected = Bitboard.empty()
        for pos in board.actives():
            expected |= direction.apply(pos.to_bitboard())
        assert direction.apply(board) == expected

    def test_center_square_steps(self):
        # Square 14 sits at graphical (3, 4)
        center = Position(14).to_bitboard()
        assert Direction.FORWARD_RIGHT.apply(center) == Position(17).to_bitboard()
        assert Direction.FORWARD_LEFT.apply(center) == Position(18).to_bitboard()
        assert Direction.BACKWARD_LEFT.apply(center) == Position(10).to_bitboard()
        assert Direction.BACKWARD_RIGHT.apply(center) == Position(9).to_bitboard()

    def test_no_wrap_across_row_edges(self):
        # Square 11 is on the left edge, square 4 on the right edge
        assert Direction.FORWARD_LEFT.apply(Position(11).to_bitboard()).is_empty()
        assert Direction.BACKWARD_LEFT.apply(Position(11).to_bitboard()).is_empty()
        assert Direction.BACKWARD_RIGHT.apply(Position(11).to_bitboard()) == Position(7).to_bitboard()
        assert Direction.FORWARD_RIGHT.apply(Position(4).to_bitboard()).is_empty()
        assert Direction.BACKWARD_RIGHT.apply(Position(4).to_bitboard()).is_empty()

    def test_forward_drops_last_row(self):
        last_row = Bitboard(0xF0000000)
        assert Direction.FORWARD_RIGHT.apply(last_row).is_empty()
        assert Direction.FORWARD_LEFT.apply(last_row).is_empty()

    def test_backward_drops_first_row(self):
        first_row = Bitboard(0x0000000F)
        assert Direction.BACKWARD_LEFT.apply(first_row).is_empty()
        assert Direction.BACKWARD_RIGHT.apply(first_row).is_empty()

    def test_opening_front_row_advance(self):
        front = Bitboard(BLACK_START) & Bitboard(0x00000F00)
        assert Direction.FORWARD_RIGHT.apply(front) == Bitboard(0x0000F000)
        assert Direction.FORWARD_LEFT.apply(front) == Bitboard(0x0000E000)


class TestOpposite:
    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involution(self, direction):
        assert direction.opposite.opposite is direction
        assert direction.opposite is not direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_reversal_recovers_source(self, direction):
        for index in range(32):
            src = Position(index).to_bitboard()
            dst = direction.apply(src)
            if dst:
                assert direction.opposite.apply(dst) == src

    def test_deltas_cancel(self):
        for direction in Direction:
            dx, dy = direction.delta
            ox, oy = direction.opposite.delta
            assert (dx + ox, dy + oy) == (0, 0)

    def test_generation_order(self):
        assert list(Direction) == [
            Direction.FORWARD_RIGHT,
            Direction.FORWARD_LEFT,
            Direction.BACKWARD_LEFT,
            Direction.BACKWARD_RIGHT,
        ]


class TestValidity:
    def test_kings_move_everywhere(self):
        for side in Side:
            for direction in Direction:
                assert direction.valid_for_piece(side, is_king=True)

    def test_black_pones_move_forward(self):
        assert Direction.FORWARD_RIGHT.valid_for_piece(Side.BLACK, False)
        assert Direction.FORWARD_LEFT.valid_for_piece(Side.BLACK, False)
        assert not Direction.BACKWARD_LEFT.valid_for_piece(Side.BLACK, False)
        assert not Direction.BACKWARD_RIGHT.valid_for_piece(Side.BLACK, False)

    def test_red_pones_move_backward(self):
        assert not Direction.FORWARD_RIGHT.valid_for_piece(Side.RED, False)
        assert not Direction.FORWARD_LEFT.valid_for_piece(Side.RED, False)
        assert Direction.BACKWARD_LEFT.valid_for_piece(Side.RED, False)
        assert Direction.BACKWARD_RIGHT.valid_for_piece(Side.RED, False)

    def test_board_edge(self):
        assert Direction.FORWARD_RIGHT.valid_for_board_edge(3, 4)
        assert not Direction.FORWARD_RIGHT.valid_for_board_edge(7, 4)
        assert not Direction.FORWARD_LEFT.valid_for_board_edge(3, 0)
        assert not Direction.BACKWARD_LEFT.valid_for_board_edge(0, 3)
        assert not Direction.BACKWARD_RIGHT.valid_for_board_edge(4, 7)

    def test_board_edge_two_steps(self):
        assert Direction.FORWARD_RIGHT.valid_for_board_edge(5, 4, steps=2)
        assert not Direction.FORWARD_RIGHT.valid_for_board_edge(6, 4, steps=2)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_board_edge_agrees_with_apply(self, direction):
        for index in range(32):
            pos = Position(index)
            on_board = direction.valid_for_board_edge(pos.graphical_x, pos.graphical_y)
            assert on_board == bool(direction.apply(pos.to_bitboard()))
