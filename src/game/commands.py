"""
Parsing of the slash commands typed at the game prompt.
"""
import string
from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import MinesweeperError


HELP = "/help"
QUIT = "/quit"
OPEN = "/open"
FLAG = "/flag"
HINT = "/hint"
CHEAT = "/cheat"
WIN = "/win"

HELP_TEXT = "\n".join([
    "Available commands:",
    "/help - Displays a list of available commands.",
    "/quit - Quits the game.",
    "/open <row> <column> - Opens a cell at the specified coordinates.",
    "/flag <row> <column> - Flags a cell at the specified coordinates. "
    "If the cell is already flagged, it will be unflagged.",
    "/hint - Reveals a random cell without a bomb.",
    "/cheat - Reveals every bomb on the board.",
    "/win - Reveals the entire board and wins the game.",
])


class CommandError(MinesweeperError, ValueError):
    """Input could not be turned into a command or a position."""


@dataclass
class Command:
    """A command token and its arguments."""

    name: str
    args: List[str] = field(default_factory=list)


def parse_command(line: str) -> Command:
    """Split a prompt line into a command token and arguments."""
    tokens = line.split()
    if not tokens:
        return Command("")
    return Command(tokens[0], tokens[1:])


def row_label(row: int) -> str:
    """Letter shown for a zero-based row index."""
    return chr(ord("A") + row)


def parse_position(
    command: Command, rows: int, cols: int
) -> Tuple[int, int]:
    """
    Convert ``<row-letter> <col-number>`` arguments to a zero-based position.

    Args:
        command: Parsed command carrying the two arguments.
        rows: Board height, used for the range check.
        cols: Board width, used for the range check.

    Returns:
        (row, col) tuple.

    Raises:
        CommandError: Wrong number of arguments, malformed or
            out-of-range row or column.
    """
    if len(command.args) != 2:
        raise CommandError(
            f"Invalid command, please use {command.name} <row> <column>."
        )
    row_text, col_text = command.args

    last_row = row_label(rows - 1)
    if len(row_text) != 1 or row_text not in string.ascii_letters:
        raise CommandError(
            f"Invalid row! Please enter a letter between A and {last_row}."
        )
    row = ord(row_text.upper()) - ord("A")
    if not 0 <= row < rows:
        raise CommandError(
            f"Invalid row! Please enter a letter between A and {last_row}."
        )

    if not (col_text.isascii() and col_text.isdigit()):
        raise CommandError("Invalid column! Please enter a valid number.")
    col = int(col_text) - 1
    if not 0 <= col < cols:
        raise CommandError(
            f"Invalid column! Please enter a number between 1 and {cols}."
        )
    return row, col
