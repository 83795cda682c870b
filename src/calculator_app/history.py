"""Bounded, in-memory log of completed computations."""

from collections import deque
from typing import Tuple

from .config import DEFAULT_HISTORY_LIMIT


class CalculationHistory:
    """Chronological (oldest-first) record of evaluations, capped at ``limit``."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._entries: deque = deque(maxlen=limit)

    def append(self, entry: str) -> None:
        # deque evicts the oldest entry once maxlen is reached
        self._entries.append(entry)

    def entries(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
