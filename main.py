#!/usr/bin/env python3
"""
Console Minesweeper - Main entry point.

Usage:
    python main.py
"""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from game.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
