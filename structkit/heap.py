"""Array-backed max-heap and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def _sift_down(items: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def _sift_up(items: list[Any], index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not items[index] > items[parent]:
            return
        items[index], items[parent] = items[parent], items[index]
        index = parent


class MaxHeap:
    """A max-heap stored level by level, left to right."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Append ``value`` as the last node and bubble it up."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value.

        Raises IndexError when the heap is empty.
        """
        if not self._items:
            raise IndexError("pop from empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, len(self._items), 0)
        return top

    def levels(self) -> list[tuple[Any, int]]:
        """Pairs of value and depth (root at 0) in breadth-first order."""
        return [(value, (i + 1).bit_length() - 1) for i, value in enumerate(self._items)]

    def sorted_descending(self) -> list[Any]:
        """Values in the order repeated extraction of the maximum yields them."""
        copy = MaxHeap()
        copy._items = list(self._items)
        return [copy.pop() for _ in range(len(copy))]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in storage (breadth-first) order."""
        return iter(list(self._items))


def heapsort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted with an in-place heap sort."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def heap_extraction_order(values: Iterable[Any]) -> list[Any]:
    """Return the values in the order a max-heap releases them: largest first."""
    return MaxHeap(values).sorted_descending()