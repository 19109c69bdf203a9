"""
Exceptions raised by the Minesweeper board and session.

Every move rejection is an ``InvalidMoveError`` so the console layer can
report it as a message and leave the board untouched.
"""


class MinesweeperError(Exception):
    """Base class for all game errors."""


class InvalidMoveError(MinesweeperError, ValueError):
    """A move was rejected; the board was not modified."""


class OutOfBoundsError(InvalidMoveError):
    """Position lies outside the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Position ({row}, {col}) is outside the board")
        self.row = row
        self.col = col


class CellAlreadyRevealedError(InvalidMoveError):
    """Cell has already been opened."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__("Cell already opened!")
        self.row = row
        self.col = col


class CellAlreadyFlaggedError(InvalidMoveError):
    """Cell carries a flag and cannot be opened."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__("Flag already placed!")
        self.row = row
        self.col = col


class NoFlagsRemainingError(InvalidMoveError):
    """Every available flag is already on the board."""

    def __init__(self) -> None:
        super().__init__("Flag limit reached!")


class NoHintAvailableError(InvalidMoveError):
    """No hidden numbered safe cell is left to give away."""

    def __init__(self) -> None:
        super().__init__("No hints available!")


class GameOverError(InvalidMoveError):
    """The game has already been won or lost."""

    def __init__(self) -> None:
        super().__init__("The game is already over!")
