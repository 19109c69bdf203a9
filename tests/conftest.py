"""
Pytest configuration and shared fixtures.
"""
import io
import random
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Board, BoardConfig, Cell, MinesweeperApp, Session, WinnerHistory


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def scripted_input(lines: Iterable[str]) -> Callable[[], str]:
    """Input function that replays lines, then signals end of input."""
    remaining = iter(lines)

    def read() -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def make_board(width: int, height: int, mines) -> Board:
    """Board with a fixed mine layout."""
    board = Board(BoardConfig(width, height, len(mines)))
    board.set_mines(mines)
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines, not yet seeded."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def board_with_mines() -> Callable[..., Board]:
    """Factory: board_with_mines(width, height, mines)."""
    return make_board


@pytest.fixture
def seeded_board() -> Board:
    """9x9 board with 10 randomly placed mines."""
    board = Board(rng=random.Random(1234))
    board.place_mines()
    return board


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return make_board(3, 3, [(0, 0)])


@pytest.fixture
def two_mine_board() -> Board:
    """3x3 board with mines in opposite corners."""
    return make_board(3, 3, [(0, 0), (2, 2)])


@pytest.fixture
def bottom_mines_board() -> Board:
    """
    9x9 board with the bottom row mined plus one mine above its right end.

    Opening the top-left corner clears every safe cell.
    """
    mines = [(8, col) for col in range(9)] + [(7, 8)]
    return make_board(9, 9, mines)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return make_board(5, 5, [])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def winners() -> WinnerHistory:
    return WinnerHistory()


@pytest.fixture
def session(corner_mine_board: Board, winners: WinnerHistory,
            clock: FakeClock) -> Session:
    """Session on the 3x3 corner-mine board."""
    return Session("Ann", winners, board=corner_mine_board, clock=clock)


@pytest.fixture
def make_app(clock: FakeClock):
    """Factory for an app fed from scripted input lines."""
    def factory(*lines: str) -> MinesweeperApp:
        return MinesweeperApp(
            input_fn=scripted_input(lines),
            output=io.StringIO(),
            rng=random.Random(99),
            clock=clock,
        )
    return factory
