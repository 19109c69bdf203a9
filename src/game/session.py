"""
Console session driving one game of Minesweeper.

Turns prompt lines into board moves, renders the board as text and
records the player in the winner history when the game is won.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .board import BEGINNER, Board, BoardConfig, GameState
from .cell import symbol_for
from .commands import (
    CHEAT,
    FLAG,
    HELP,
    HELP_TEXT,
    HINT,
    OPEN,
    QUIT,
    WIN,
    Command,
    parse_command,
    parse_position,
    row_label,
)
from .errors import MinesweeperError
from .winners import WinnerHistory, format_elapsed

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = (
    "Invalid command! To see the list of available commands, type /help."
)


# ============================================================================
# Rendering
# ============================================================================

def render_board(observation: np.ndarray) -> str:
    """
    Render a board observation as console text.

    Each row ends with its letter label; the last line numbers the
    columns from 1.
    """
    height, width = observation.shape
    lines = []
    for row in range(height):
        cells = "".join(
            f"{symbol_for(int(observation[row, col]))}  " for col in range(width)
        )
        lines.append(f"{cells}| {row_label(row)}")
    lines.append("".join(f"{col + 1}| " for col in range(width)))
    return "\n".join(lines)


# ============================================================================
# Session
# ============================================================================

@dataclass
class CommandOutcome:
    """
    Result of one prompt line.

    Attributes:
        messages: Text to show the player, in order.
        finished: The game is over (won, lost or quit).
    """

    messages: List[str] = field(default_factory=list)
    finished: bool = False


class Session:
    """
    One game: a seeded board, the player's name and a running clock.
    """

    def __init__(
        self,
        player: str,
        winners: WinnerHistory,
        board: Optional[Board] = None,
        config: BoardConfig = BEGINNER,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Start a game.

        Args:
            player: Name recorded if the game is won.
            winners: History shared by every game of the process.
            board: Board to play on; a new one is built from config if omitted.
            config: Layout for a new board.
            clock: Monotonic time source in seconds.
        """
        self.player = player
        self.winners = winners
        self.board = board if board is not None else Board(config)
        if self.board.game_state == GameState.NEW:
            self.board.place_mines()
        self.clock = clock
        self.start_time = clock()
        self.finished = False
        self._handlers: Dict[str, Callable[[Command], CommandOutcome]] = {
            HELP: self._help,
            QUIT: self._quit,
            OPEN: self._open,
            FLAG: self._flag,
            HINT: self._hint,
            CHEAT: self._cheat,
            WIN: self._win,
        }

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def flags_remaining(self) -> int:
        return self.board.flags_remaining

    def elapsed(self) -> float:
        """Seconds since the game started."""
        return self.clock() - self.start_time

    def elapsed_text(self) -> str:
        return format_elapsed(self.elapsed())

    def render(self) -> str:
        """Current board as console text."""
        return render_board(self.board.get_observation())

    def status(self) -> str:
        """Lines shown before every prompt."""
        return (
            f"Available flags: {self.flags_remaining}\n\n"
            f"Elapsed time: {self.elapsed_text()}\n\n"
            "[Type /help for assistance]"
        )

    # ========================================================================
    # Command Dispatch
    # ========================================================================

    def handle(self, line: str) -> CommandOutcome:
        """
        Execute one prompt line.

        Invalid input produces an explanatory message and leaves the
        board unchanged.
        """
        if self.finished:
            return CommandOutcome(["The game is already over!"], finished=True)

        command = parse_command(line)
        handler = self._handlers.get(command.name)
        if handler is None:
            logger.debug("Unknown command %r", line)
            return CommandOutcome([UNKNOWN_COMMAND, self.render()])
        try:
            return handler(command)
        except MinesweeperError as exc:
            logger.debug("Rejected %r: %s", line, exc)
            return CommandOutcome([str(exc)])

    def _help(self, command: Command) -> CommandOutcome:
        return CommandOutcome([HELP_TEXT, self.render()])

    def _quit(self, command: Command) -> CommandOutcome:
        self.finished = True
        return CommandOutcome(["Returning to the menu..."], finished=True)

    def _open(self, command: Command) -> CommandOutcome:
        row, col = self._position(command)
        result = self.board.reveal(row, col)
        messages = [self.render()]
        if result.hit_mine:
            self.finished = True
            messages.append(
                f"You lose! time: {self.elapsed_text()}\nReturning to menu...\n"
            )
            return CommandOutcome(messages, finished=True)
        return self._after_move(messages)

    def _flag(self, command: Command) -> CommandOutcome:
        row, col = self._position(command)
        self.board.toggle_flag(row, col)
        return self._after_move([self.render()])

    def _hint(self, command: Command) -> CommandOutcome:
        self.board.hint()
        return self._after_move([self.render()])

    def _cheat(self, command: Command) -> CommandOutcome:
        self.board.reveal_all()
        return CommandOutcome([self.render()])

    def _win(self, command: Command) -> CommandOutcome:
        self.board.force_win()
        return self._finish_won([self.render()])

    def _position(self, command: Command) -> Tuple[int, int]:
        return parse_position(
            command, self.board.config.height, self.board.config.width
        )

    def _after_move(self, messages: List[str]) -> CommandOutcome:
        if self.board.is_won:
            return self._finish_won(messages)
        return CommandOutcome(messages)

    def _finish_won(self, messages: List[str]) -> CommandOutcome:
        elapsed = self.elapsed()
        self.winners.add(self.player, elapsed)
        self.finished = True
        logger.info("%s won in %.1fs", self.player, elapsed)
        messages.append(
            f"You win! time: {format_elapsed(elapsed)}\n"
            "Returning to the menu...\n"
        )
        return CommandOutcome(messages, finished=True)
