"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flagging, hints and game state management.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import (
    CellAlreadyFlaggedError,
    CellAlreadyRevealedError,
    GameOverError,
    NoFlagsRemainingError,
    NoHintAvailableError,
    OutOfBoundsError,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NEW = auto()
    MINES_PLACED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.height > 26:
            raise ValueError("Board cannot have more than 26 rows")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


# The console game always plays this layout
BEGINNER = BoardConfig(9, 9, 10)


@dataclass
class RevealResult:
    """
    Outcome of opening a cell.

    Attributes:
        hit_mine: The opened cell held a mine and the game is lost.
        revealed: Positions opened by this move, in reveal order.
    """

    hit_mine: bool = False
    revealed: List[Position] = field(default_factory=list)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    flag accounting and win/lose conditions.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.NEW
    _safe_cells_remaining: int = 0
    _flags_remaining: int = 0
    _correct_flags: int = 0
    _total_mines: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells and reset the counters."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._game_state = GameState.NEW
        self._safe_cells_remaining = self.config.total_cells - self.config.num_mines
        self._flags_remaining = self.config.num_mines
        self._correct_flags = 0
        self._total_mines = self.config.num_mines

    def place_mines(self, count: Optional[int] = None) -> List[Position]:
        """
        Place mines uniformly at random, without replacement.

        Args:
            count: Number of mines (defaults to the configured count).

        Returns:
            The chosen mine positions.

        Raises:
            ValueError: If mines are already placed or count does not
                leave at least one safe cell.
        """
        count = self.config.num_mines if count is None else count
        self._check_mine_count(count)
        mine_positions = self.rng.sample(list(self.positions()), count)
        self._seed(mine_positions)
        return mine_positions

    def set_mines(self, positions: Iterable[Position]) -> None:
        """
        Seed a fixed mine layout.

        Raises:
            ValueError: If mines are already placed, a position is off the
                board or repeated, or the layout leaves no safe cell.
        """
        mine_positions = list(positions)
        if len(set(mine_positions)) != len(mine_positions):
            raise ValueError("Duplicate mine positions")
        for row, col in mine_positions:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is off the board")
        self._check_mine_count(len(mine_positions))
        self._seed(mine_positions)

    def _check_mine_count(self, count: int) -> None:
        if self._game_state != GameState.NEW:
            raise ValueError("Mines have already been placed")
        if count < 0:
            raise ValueError("Number of mines cannot be negative")
        if count >= self.config.total_cells:
            raise ValueError(
                f"Too many mines (max {self.config.total_cells - 1})"
            )

    def _seed(self, mine_positions: List[Position]) -> None:
        """Mark mines, compute counts and reset the flag accounting."""
        for row, col in mine_positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._safe_cells_remaining = self.config.total_cells - len(mine_positions)
        self._flags_remaining = len(mine_positions)
        self._correct_flags = 0
        self._total_mines = len(mine_positions)
        self._game_state = GameState.MINES_PLACED
        logger.debug("Placed %d mines on %dx%d board",
                     len(mine_positions), self.config.height, self.config.width)

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row, col in self.positions():
            if not self._grid[row][col].is_mine:
                self._grid[row][col].adjacent_mines = self.adjacent_mine_count(
                    row, col
                )

    def adjacent_mine_count(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        self._require_position(row, col)
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def _require_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBoundsError(row, col)

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) on the board in row-major order."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                yield row, col

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def _begin_move(self) -> None:
        """Reject moves on a finished game; seed mines on an unseeded one."""
        if self._game_state in (GameState.WON, GameState.LOST):
            raise GameOverError()
        if self._game_state == GameState.NEW:
            self.place_mines()
        self._game_state = GameState.PLAYING

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Open the cell at the given position.

        A mine loses the game and exposes every mine. Otherwise the cell
        is opened and, when it has no adjacent mines, its connected
        zero-region is flood-filled along with the numbered border.

        Raises:
            OutOfBoundsError: Position is off the board.
            CellAlreadyRevealedError: Cell is already open.
            CellAlreadyFlaggedError: Cell carries a flag.
            GameOverError: Game has already finished.
        """
        self._require_position(row, col)
        cell = self._grid[row][col]
        if not self.is_playing:
            raise GameOverError()
        if cell.is_revealed:
            raise CellAlreadyRevealedError(row, col)
        if cell.is_flagged:
            raise CellAlreadyFlaggedError(row, col)
        self._begin_move()

        if cell.is_mine:
            cell.reveal()
            cell.exploded = True
            self.reveal_all()
            self._game_state = GameState.LOST
            logger.info("Mine hit at (%d, %d)", row, col)
            return RevealResult(hit_mine=True, revealed=[(row, col)])

        revealed = self._flood_fill(row, col)
        self._check_win_condition()
        return RevealResult(revealed=revealed)

    def _flood_fill(self, row: int, col: int) -> List[Position]:
        """Reveal the region around a safe cell using an explicit stack."""
        stack = [(row, col)]
        revealed = []
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if cell.is_mine or not cell.reveal():
                continue
            self._safe_cells_remaining -= 1
            revealed.append((current_row, current_col))
            if cell.adjacent_mines == 0:
                for neighbor_row, neighbor_col in self._get_neighbors(
                    current_row, current_col
                ):
                    if self._grid[neighbor_row][neighbor_col].is_hidden:
                        stack.append((neighbor_row, neighbor_col))
        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Place or remove a flag.

        Returns:
            True if the cell is flagged after the call, False if the
            flag was removed.

        Raises:
            OutOfBoundsError: Position is off the board.
            CellAlreadyRevealedError: Cell is already open.
            NoFlagsRemainingError: A new flag was requested with none left.
            GameOverError: Game has already finished.
        """
        self._require_position(row, col)
        cell = self._grid[row][col]
        if not self.is_playing:
            raise GameOverError()
        if cell.is_revealed:
            raise CellAlreadyRevealedError(row, col)
        if cell.is_hidden and self._flags_remaining == 0:
            raise NoFlagsRemainingError()
        self._begin_move()

        cell.toggle_flag()
        delta = 1 if cell.is_flagged else -1
        self._flags_remaining -= delta
        if cell.is_mine:
            self._correct_flags += delta

        self._check_win_condition()
        return cell.is_flagged

    def hint(self) -> Position:
        """
        Open a random hidden safe cell that borders at least one mine.

        Returns:
            The opened position.

        Raises:
            NoHintAvailableError: No such cell is left.
            GameOverError: Game has already finished.
        """
        if self._game_state in (GameState.WON, GameState.LOST):
            raise GameOverError()
        if self._game_state == GameState.NEW:
            self.place_mines()
        candidates = [
            (row, col) for row, col in self.positions()
            if self._is_hint_candidate(self._grid[row][col])
        ]
        if not candidates:
            raise NoHintAvailableError()
        self._begin_move()

        row, col = self.rng.choice(candidates)
        self._grid[row][col].reveal()
        self._safe_cells_remaining -= 1
        self._check_win_condition()
        return row, col

    @staticmethod
    def _is_hint_candidate(cell: Cell) -> bool:
        return (
            cell.state == CellState.HIDDEN
            and not cell.is_mine
            and cell.adjacent_mines > 0
        )

    def reveal_all(self) -> None:
        """Expose every mine without changing the game state."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if cell.is_mine:
                cell.exposed = True

    def force_win(self) -> None:
        """Expose the board and end the game as won."""
        if self._game_state in (GameState.WON, GameState.LOST):
            raise GameOverError()
        if self._game_state == GameState.NEW:
            self.place_mines()
        self.reveal_all()
        self._game_state = GameState.WON
        logger.info("Game won by force")

    def _check_win_condition(self) -> None:
        """
        Win once every safe cell is open AND every mine is flagged.

        Both halves are required; opening all safe cells alone does not
        end the game.
        """
        if (
            self._safe_cells_remaining == 0
            and self._correct_flags == self.total_mines
        ):
            self._game_state = GameState.WON
            logger.info("Board cleared")

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts moves."""
        return self._game_state not in (GameState.WON, GameState.LOST)

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def total_mines(self) -> int:
        """Mines on the board (the configured count until seeded)."""
        return self._total_mines

    @property
    def safe_cells_remaining(self) -> int:
        """Non-mine cells not yet opened."""
        return self._safe_cells_remaining

    @property
    def flags_remaining(self) -> int:
        """Flags the player may still place."""
        return self._flags_remaining

    @property
    def correct_flags(self) -> int:
        """Flags that sit on mines."""
        return self._correct_flags

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_positions(self) -> List[Position]:
        """Positions holding a mine, in row-major order."""
        return [
            (row, col) for row, col in self.positions()
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = exposed mine
                10 = exploded mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def reset(self) -> None:
        """Reset board to an unseeded state for a new game."""
        self._init_grid()
