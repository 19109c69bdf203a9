"""
Command-line entry point for console Minesweeper.
"""
import argparse
import logging
from typing import List, Optional

from .menu import MinesweeperApp


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the console menu."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Console Minesweeper - 9x9 board with 10 mines",
        epilog="In game, type /help for the list of commands.",
    )
    parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    return MinesweeperApp().run()
