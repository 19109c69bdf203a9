"""
Minesweeper game module.

Provides the board model and the console session that drives it.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState, RevealResult, BEGINNER
from .errors import (
    MinesweeperError,
    InvalidMoveError,
    OutOfBoundsError,
    CellAlreadyRevealedError,
    CellAlreadyFlaggedError,
    NoFlagsRemainingError,
    NoHintAvailableError,
    GameOverError,
)
from .commands import Command, CommandError, parse_command, parse_position
from .winners import WinnerHistory, WinnerRecord, format_elapsed
from .session import Session, CommandOutcome, render_board
from .menu import MinesweeperApp

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealResult",
    "BEGINNER",
    "MinesweeperError",
    "InvalidMoveError",
    "OutOfBoundsError",
    "CellAlreadyRevealedError",
    "CellAlreadyFlaggedError",
    "NoFlagsRemainingError",
    "NoHintAvailableError",
    "GameOverError",
    "Command",
    "CommandError",
    "parse_command",
    "parse_position",
    "WinnerHistory",
    "WinnerRecord",
    "format_elapsed",
    "Session",
    "CommandOutcome",
    "render_board",
    "MinesweeperApp",
]
