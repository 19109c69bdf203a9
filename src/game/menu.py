"""
Top-level console menu: start games, list recent winners, exit.
"""
import logging
import random
import sys
import time
from typing import Callable, Optional, TextIO

from .board import BEGINNER, Board, BoardConfig
from .session import Session
from .winners import WINNER_CAPACITY, WinnerHistory

logger = logging.getLogger(__name__)

NEW_GAME = 1
LAST_WINS = 2
EXIT_GAME = 3


class MinesweeperApp:
    """
    Application context for a console run.

    Owns everything that outlives a single game: the winner history,
    the anonymous-player counter and the console streams.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
        config: BoardConfig = BEGINNER,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.input_fn = input_fn if input_fn is not None else input
        self.output = output if output is not None else sys.stdout
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.winners = WinnerHistory(WINNER_CAPACITY)
        self.anonymous_count = 0

    # ========================================================================
    # Console I/O
    # ========================================================================

    def _print(self, text: str = "") -> None:
        print(text, file=self.output)

    def _prompt(self, prompt: str) -> Optional[str]:
        """Show a prompt and read one line; None once input is exhausted."""
        self.output.write(prompt)
        self.output.flush()
        try:
            return self.input_fn()
        except EOFError:
            self._print()
            return None

    # ========================================================================
    # Menu
    # ========================================================================

    def run(self) -> int:
        """
        Show the menu until the player exits.

        Returns:
            Process exit code.
        """
        while True:
            self._print("MineSweeper Game")
            self._print("----------------")
            self._print("1. New Game")
            self._print(f"2. Last {WINNER_CAPACITY} Wins")
            self._print("3. Exit Game")
            line = self._prompt("Option> ")
            if line is None:
                return 0

            try:
                choice = int(line.strip())
            except ValueError:
                self._print("Invalid option, please choose a valid number.\n")
                continue

            if choice == NEW_GAME:
                self.play_game()
            elif choice == LAST_WINS:
                self.show_winners()
            elif choice == EXIT_GAME:
                self._print("Exiting...")
                return 0
            else:
                self._print(
                    "Invalid option, please choose a number between 1 and 3.\n"
                )

    def show_winners(self) -> None:
        if not len(self.winners):
            self._print("\nNo winners yet.")
        else:
            self._print(f"\nLast {WINNER_CAPACITY} wins:")
            for record in self.winners:
                self._print(str(record))
        self._print()

    def ask_name(self) -> Optional[str]:
        """Prompt for a username; blank names become ``Anonymous N``."""
        name = self._prompt("Username> ")
        if name is None:
            return None
        name = name.strip()
        if not name:
            self.anonymous_count += 1
            name = f"Anonymous {self.anonymous_count}"
        return name

    def new_session(self, player: str) -> Session:
        board = Board(self.config, rng=self.rng)
        return Session(player, self.winners, board=board, clock=self.clock)

    def play_game(self) -> None:
        """Play one game from the name prompt to win, loss or quit."""
        player = self.ask_name()
        if player is None:
            return
        session = self.new_session(player)
        logger.debug("New game for %s", player)

        self._print()
        self._print(session.render())
        self._print(f"Welcome, {player}!")
        while not session.finished:
            self._print()
            self._print(session.status())
            line = self._prompt("Command> ")
            if line is None:
                return
            outcome = session.handle(line)
            for message in outcome.messages:
                self._print(message)
