"""
Winner history kept for the lifetime of the process.
"""
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List

# Number of most recent winners kept
WINNER_CAPACITY = 10


def format_elapsed(seconds: float) -> str:
    """Format a duration as ``HHh:MMm:SSs``."""
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}h:{minutes:02d}m:{secs:02d}s"


@dataclass(frozen=True)
class WinnerRecord:
    """A player name and the time it took them to win."""

    name: str
    elapsed: float

    def __str__(self) -> str:
        return f"{self.name} --> {format_elapsed(self.elapsed)}"


class WinnerHistory:
    """
    Bounded list of recent winners.

    Once full, each new winner overwrites the oldest entry.
    """

    def __init__(self, capacity: int = WINNER_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("Capacity must be positive")
        self.capacity = capacity
        self._records: Deque[WinnerRecord] = deque(maxlen=capacity)

    def add(self, name: str, elapsed: float) -> WinnerRecord:
        """Record a win and return the stored entry."""
        record = WinnerRecord(name, elapsed)
        self._records.append(record)
        return record

    def records(self) -> List[WinnerRecord]:
        """Winners from oldest to newest."""
        return list(self._records)

    def __iter__(self) -> Iterator[WinnerRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
