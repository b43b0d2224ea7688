"""Height-balanced binary search tree keyed on comparable values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class AVLTree:
    """A set of keys kept in an AVL tree.

    Inserting a key that is already present and deleting one that is
    absent both leave the tree unchanged.
    """

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree, rebalancing on the way back up."""
        self._root = self._insert(self._root, key)

    def _insert(self, node: Optional[_Node], key: Any) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        _update(node)
        balance = _balance(node)

        if balance > 1 and key < node.left.key:
            return _rotate_right(node)
        if balance < -1 and key > node.right.key:
            return _rotate_left(node)
        if balance > 1 and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present, rebalancing on the way back up."""
        self._root = self._delete(self._root, key)

    def _delete(self, node: Optional[_Node], key: Any) -> Optional[_Node]:
        if node is None:
            return None
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        elif node.left is None or node.right is None:
            self._size -= 1
            node = node.left if node.left is not None else node.right
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.right = self._delete(node.right, successor.key)

        if node is None:
            return None

        _update(node)
        balance = _balance(node)

        if balance > 1 and _balance(node.left) >= 0:
            return _rotate_right(node)
        if balance > 1 and _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and _balance(node.right) <= 0:
            return _rotate_left(node)
        if balance < -1 and _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending (in-order) order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)