"""Unbalanced binary search tree keyed by a function of its items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence


@dataclass
class _Node:
    item: Any
    smaller: Optional["_Node"] = None
    larger: Optional["_Node"] = None


def _identity(value: Any) -> Any:
    return value


class BinarySearchTree:
    """Binary search tree with unique keys, ordered by ``key(item)``."""

    def __init__(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        self._key = key or _identity
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, item: Any) -> bool:
        """Insert an item; return False if its key is already present."""
        item_key = self._key(item)
        if self._root is None:
            self._root = _Node(item)
            self._size += 1
            return True
        node = self._root
        while True:
            node_key = self._key(node.item)
            if node_key > item_key:
                if node.smaller is None:
                    node.smaller = _Node(item)
                    break
                node = node.smaller
            elif node_key < item_key:
                if node.larger is None:
                    node.larger = _Node(item)
                    break
                node = node.larger
            else:
                return False
        self._size += 1
        return True

    def find(self, probe: Any) -> Any:
        """Return the item whose key equals ``probe``, or None."""
        node = self._root
        while node is not None:
            node_key = self._key(node.item)
            if node_key > probe:
                node = node.smaller
            elif node_key < probe:
                node = node.larger
            else:
                return node.item
        return None

    def find_where(self, predicate: Callable[[Any], bool]) -> Any:
        """Return the first item, in pre-order, that satisfies ``predicate``, or None."""
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            if predicate(node.item):
                return node.item
            if node.larger is not None:
                stack.append(node.larger)
            if node.smaller is not None:
                stack.append(node.smaller)
        return None

    def in_order(self) -> Iterator[Any]:
        """Yield the items in ascending key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.smaller
            node = stack.pop()
            yield node.item
            node = node.larger

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 when empty."""
        level = [self._root] if self._root else []
        height = -1
        while level:
            height += 1
            level = [child for n in level for child in (n.smaller, n.larger) if child]
        return height

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._root is None

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()

    def __len__(self) -> int:
        return self._size

    @classmethod
    def from_sorted(
        cls, items: Iterable[Any], key: Optional[Callable[[Any], Any]] = None
    ) -> "BinarySearchTree":
        """Build a balanced tree from items already sorted by key."""
        tree = cls(key)
        seq: Sequence[Any] = list(items)

        def build(low: int, high: int) -> Optional[_Node]:
            if low > high:
                return None
            middle = (low + high) // 2
            node = _Node(seq[middle])
            node.smaller = build(low, middle - 1)
            node.larger = build(middle + 1, high)
            return node

        tree._root = build(0, len(seq) - 1)
        tree._size = len(seq)
        return tree