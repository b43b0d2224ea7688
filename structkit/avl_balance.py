"""AVL tree that keeps an explicit balance factor on every node."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 0
    balance: int = 0  # left height minus right height


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else -1


def _refresh(node: _Node) -> None:
    left, right = _height(node.left), _height(node.right)
    node.height = 1 + max(left, right)
    node.balance = left - right


def _rotate_right(problem: _Node) -> _Node:
    pivot = problem.left
    problem.left = pivot.right
    pivot.right = problem
    _refresh(problem)
    _refresh(pivot)
    return pivot


def _rotate_left(problem: _Node) -> _Node:
    pivot = problem.right
    problem.right = pivot.left
    pivot.left = problem
    _refresh(problem)
    _refresh(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    if node.balance == -2:
        if node.right.balance > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if node.balance == 2:
        if node.left.balance < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: Optional[_Node], value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    _refresh(node)
    return _rebalance(node)


def _delete(node: Optional[_Node], value: Any) -> Optional[_Node]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    elif node.left is None or node.right is None:
        node = node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)
    if node is None:
        return None
    _refresh(node)
    return _rebalance(node)


class BalanceFactorTree:
    """AVL tree rebalanced with LL, LR, RR and RL rotations.

    Equal values are not stored twice; deleting an absent value is a no-op.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` and restore the balance of every node on its path."""
        self._root = _insert(self._root, value)

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present and restore balance."""
        self._root = _delete(self._root, value)

    def bfs(self) -> list[Any]:
        """Values in breadth-first (level) order, left child before right."""
        if self._root is None:
            return []
        order = []
        queue = deque([self._root])
        while queue:
            current = queue.popleft()
            order.append(current.value)
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)
        return order

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right