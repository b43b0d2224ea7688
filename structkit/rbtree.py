"""Red-black tree with bottom-up insertion fix-up."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class _Node:
    value: Any
    color: Color = Color.RED
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    parent: Optional["_Node"] = None


class RedBlackTree:
    """A red-black tree.

    Values equal to one already stored are kept and placed in the right
    subtree, so the tree behaves as a multiset.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` as a red leaf and restore the red-black rules."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            node.color = Color.BLACK
            self._root = node
            return

        parent = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right

        node.parent = parent
        if value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._fix_after_insert(node)

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is None:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.right = node
        node.parent = pivot

    def _fix_after_insert(self, node: _Node) -> None:
        while node is not self._root and node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    grandparent.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grandparent
                    continue
                if node is parent.right:
                    self._rotate_left(parent)
                    node = parent
                    parent = node.parent
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    grandparent.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grandparent
                    continue
                if node is parent.left:
                    self._rotate_right(parent)
                    node = parent
                    parent = node.parent
                self._rotate_left(grandparent)
            parent.color = Color.BLACK
            grandparent.color = Color.RED
            node = parent
        self._root.color = Color.BLACK

    def bfs(self) -> list[tuple[Any, Color]]:
        """Pairs of value and colour in breadth-first order."""
        if self._root is None:
            return []
        order = []
        queue = deque([self._root])
        while queue:
            current = queue.popleft()
            order.append((current.value, current.color))
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)
        return order

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False