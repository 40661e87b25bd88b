"""A first-in, first-out queue of arbitrary items."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class Queue:
    """FIFO queue: items leave in the order they were put in."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def put(self, item: Any) -> None:
        """Append an item at the back of the queue."""
        self._items.append(item)

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("peek from an empty queue")
        return self._items[0]

    def get(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("get from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Drop every item in the queue."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)