"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior and display codes.
"""
import pytest
from game import Cell, CellState
from game.cell import symbol_for


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_is_not_exposed(self) -> None:
        cell = Cell()
        assert cell.exposed is False
        assert cell.exploded is False


# ============================================================================
# Cell Reveal and Flag Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_changes_state_to_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_then_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Flag toggling cycles hidden -> flagged -> hidden."""
        hidden_cell.toggle_flag()
        assert hidden_cell.is_flagged is True
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Display Tests
# ============================================================================

class TestCellDisplay:
    """Test observation codes and console symbols."""

    def test_hidden_cell(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == -1
        assert symbol_for(hidden_cell.to_observation()) == "■"

    def test_flagged_cell(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2
        assert symbol_for(hidden_cell.to_observation()) == "#"

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_shows_adjacent_count(self, count: int) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count
        assert symbol_for(cell.to_observation()) == str(count)

    def test_hidden_mine_looks_like_any_hidden_cell(
        self, mine_cell: Cell
    ) -> None:
        assert symbol_for(mine_cell.to_observation()) == "■"

    def test_exposed_mine(self, mine_cell: Cell) -> None:
        mine_cell.exposed = True
        assert mine_cell.to_observation() == 9
        assert symbol_for(mine_cell.to_observation()) == "B"

    def test_flag_hides_exposed_mine(self, mine_cell: Cell) -> None:
        """A flag on an exposed mine is shown as a flag."""
        mine_cell.exposed = True
        mine_cell.toggle_flag()
        assert symbol_for(mine_cell.to_observation()) == "#"

    def test_exploded_mine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        mine_cell.exploded = True
        assert mine_cell.to_observation() == 10
        assert symbol_for(mine_cell.to_observation()) == "X"
