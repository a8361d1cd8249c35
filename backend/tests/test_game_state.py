"""Tests for the GameState snapshot handed to readers."""

import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Bounds, GameState, GridPosition, UP, to_translation


def make_snapshot(food=GridPosition(0, 1, 0)) -> GameState:
    return GameState(
        tick_number=2,
        segments=(GridPosition(0, 0, 0), GridPosition(0, -1, 0), GridPosition(0, -2, 0)),
        heading=UP,
        food=food,
        bounds=Bounds(),
    )


class TestGameState:

    def test_initialization(self):
        state = make_snapshot()
        assert state.tick_number == 2
        assert state.head == GridPosition(0, 0, 0)
        assert state.heading is UP
        assert state.game_over is False

    def test_entities_in_head_to_tail_order(self):
        state = make_snapshot()
        assert state.entities() == [
            ("head", GridPosition(0, 0, 0)),
            ("segment-1", GridPosition(0, -1, 0)),
            ("segment-2", GridPosition(0, -2, 0)),
            ("food", GridPosition(0, 1, 0)),
        ]

    def test_entities_without_food(self):
        state = make_snapshot(food=None)
        assert [name for name, _ in state.entities()] == ["head", "segment-1", "segment-2"]

    def test_to_translation_casts_each_axis(self):
        assert to_translation(GridPosition(1, -2, 3)) == (1.0, -2.0, 3.0)
        assert all(isinstance(c, float) for c in to_translation(GridPosition(0, 0, 0)))

    def test_print_board_marks(self):
        board = make_snapshot().print_board()
        lines = board.split("\n")

        # Bounds span y = 5 down to y = -5, plus the x label row
        assert len(lines) == 12
        assert lines[0].split() == ["5", "."]
        assert lines[4].split() == ["1", "A"]
        assert lines[5].split() == ["0", "H"]
        assert lines[6].split() == ["-1", "T"]
        assert lines[7].split() == ["-2", "T"]
        assert lines[-1].split() == ["0"]

    def test_print_board_grows_to_fit_snake_off_bounds(self):
        state = GameState(
            tick_number=9,
            segments=(GridPosition(2, 8, 0), GridPosition(1, 8, 0)),
            heading=UP,
            food=None,
            bounds=Bounds(),
        )
        lines = state.print_board().split("\n")
        assert lines[0].split() == ["8", ".", "T", "H"]
        assert lines[-1].split() == ["0", "1", "2"]

    def test_repr(self):
        assert "tick=2" in repr(make_snapshot())
