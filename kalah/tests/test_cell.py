"""
Tests for observable cells and the board built from them.

Tests:
- Add / take / commit / undo semantics
- Synchronous notification
- Negative additions rejected
"""

import pytest

from ..engine_core.board import Board, Row
from ..engine_core.cell import ObservableCell
from ..engine_core.errors import InvalidArgumentError
from ..engine_core.state import MAX_PITS


class TestObservableCell:
    """Tests for a single cell."""

    def test_initial_value_is_baseline(self):
        """Construction value is also the committed baseline."""
        cell = ObservableCell(4)
        assert cell.value == 4
        assert cell.committed == 4
        assert not cell.is_empty

    def test_add_notifies_immediately(self):
        """Every addition notifies before the call returns."""
        cell = ObservableCell()
        seen = []
        cell.subscribe(seen.append)

        cell.add_one()
        cell.add(3)

        assert seen == [1, 4]
        assert cell.committed == 0

    def test_add_zero_is_allowed(self):
        """Adding nothing is valid and still notifies."""
        cell = ObservableCell(2)
        seen = []
        cell.subscribe(seen.append)
        cell.add(0)
        assert seen == [2]

    def test_negative_add_fails(self):
        """Negative additions fail instead of clamping."""
        cell = ObservableCell(2)
        with pytest.raises(InvalidArgumentError):
            cell.add(-1)
        assert cell.value == 2

    def test_negative_initial_value_fails(self):
        """A cell can never start below zero."""
        with pytest.raises(InvalidArgumentError):
            ObservableCell(-3)

    def test_take_all_returns_previous_amount(self):
        """take_all empties the cell and returns what it held."""
        cell = ObservableCell(5)
        seen = []
        cell.subscribe(seen.append)

        assert cell.take_all() == 5
        assert cell.is_empty
        assert seen == [0]

    def test_undo_reverts_to_last_commit(self):
        """Undo restores the committed baseline."""
        cell = ObservableCell(3)
        cell.add(2)
        cell.commit()
        cell.take_all()
        cell.undo()
        assert cell.value == 5

    def test_commit_and_undo_notify(self):
        """Commit and undo both notify with the current value."""
        cell = ObservableCell(1)
        seen = []
        cell.subscribe(seen.append)

        cell.add_one()
        cell.undo()
        cell.commit()

        assert seen == [2, 1, 1]

    def test_multiple_subscribers_in_order(self):
        """Subscribers run in registration order."""
        cell = ObservableCell()
        calls = []
        cell.subscribe(lambda v: calls.append(("first", v)))
        cell.subscribe(lambda v: calls.append(("second", v)))

        cell.add_one()

        assert calls == [("first", 1), ("second", 1)]

    def test_clear_subscribers(self):
        """Cleared subscribers are no longer called."""
        cell = ObservableCell()
        seen = []
        cell.subscribe(seen.append)
        cell.clear_subscribers()

        cell.add_one()

        assert seen == []
        assert cell.subscriber_count == 0


class TestBoard:
    """Tests for rows and the board."""

    def test_row_has_six_pits(self):
        """A row is exactly MAX_PITS pits."""
        row = Row(3)
        assert len(row) == MAX_PITS
        assert row.values == [3] * MAX_PITS
        assert not row.is_empty

    def test_row_take_all(self):
        """Emptying a row returns its total."""
        row = Row(4)
        assert row.take_all() == 24
        assert row.is_empty

    def test_board_totals(self):
        """Board holds twelve pits and two empty stores."""
        board = Board(3)
        assert board.total_stones() == 36
        assert [store.value for store in board.stores] == [0, 0]
        assert len(list(board.cells())) == 14

    def test_board_undo_restores_every_cell(self):
        """Board-level undo reverts pits and stores."""
        board = Board(4)
        board.stores[0].add(board.rows[1][2].take_all())
        board.undo()
        assert board.rows[1][2].value == 4
        assert board.stores[0].value == 0
