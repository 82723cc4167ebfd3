# site_crawler/crawler/frontier.py
"""
Frontier: FIFO queue of pending URLs plus the set of visited ones.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, FrozenSet, Iterable, Optional, Set


class Frontier:
    """Breadth-first URL queue with exact-string visited tracking.

    The same URL may sit in the queue several times if it was pushed again
    before its first copy was popped; callers check :meth:`is_visited` when
    popping.
    """

    def __init__(self, seeds: Iterable[str] = ()) -> None:
        self._queue: Deque[str] = deque(seeds)
        self._visited: Set[str] = set()

    def push(self, url: str) -> None:
        self._queue.append(url)

    def pop(self) -> Optional[str]:
        """Next URL in discovery order, or ``None`` when drained."""
        return self._queue.popleft() if self._queue else None

    def mark_visited(self, url: str) -> bool:
        """Record *url* as visited; returns ``False`` if it already was."""
        if url in self._visited:
            return False
        self._visited.add(url)
        return True

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    @property
    def visited(self) -> FrozenSet[str]:
        return frozenset(self._visited)

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
