"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible player-controlled states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_SYMBOL = "■"
FLAG_SYMBOL = "#"
MINE_SYMBOL = "B"
EXPLODED_SYMBOL = "X"

HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9
EXPLODED_CODE = 10


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current state (hidden, revealed, or flagged).
        exposed: Mine shown after a loss or a cheat, while still unopened.
        exploded: This is the mine the player opened.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    exposed: bool = False
    exploded: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to the numeric code shown on the console board.

        Returns:
            -2: Flagged cell
            10: Exploded mine
            9: Exposed mine
            0-8: Revealed cell with adjacent mine count
            -1: Hidden cell
        """
        if self.state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.exploded:
            return EXPLODED_CODE
        if self.is_mine and (self.exposed or self.is_revealed):
            return MINE_CODE
        if self.state == CellState.REVEALED:
            return self.adjacent_mines
        return HIDDEN_CODE


def symbol_for(code: int) -> str:
    """Map an observation code to its console symbol."""
    if code == HIDDEN_CODE:
        return HIDDEN_SYMBOL
    if code == FLAGGED_CODE:
        return FLAG_SYMBOL
    if code == MINE_CODE:
        return MINE_SYMBOL
    if code == EXPLODED_CODE:
        return EXPLODED_SYMBOL
    return str(code)
