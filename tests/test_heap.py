import random

import pytest

from structkit.heap import MaxHeap, heap_extraction_order, heapsort


def _is_max_heap(items):
    return all(
        items[(i - 1) // 2] >= items[i] for i in range(1, len(items))
    )


def test_push_order_small_example():
    heap = MaxHeap([10, 20, 30])
    assert list(heap) == [30, 10, 20]


@pytest.mark.parametrize("seed", range(6))
def test_push_keeps_heap_property(seed):
    rng = random.Random(seed)
    heap = MaxHeap()
    for _ in range(60):
        heap.push(rng.randint(0, 500))
        assert _is_max_heap(list(heap))
    assert len(heap) == 60


@pytest.mark.parametrize("seed", range(6))
def test_pop_returns_values_descending(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 1000) for _ in range(80)]
    heap = MaxHeap(values)
    popped = []
    while len(heap):
        popped.append(heap.pop())
        assert _is_max_heap(list(heap))
    assert popped == sorted(values, reverse=True)


def test_pop_empty_raises():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()


def test_pop_single():
    heap = MaxHeap([7])
    assert heap.pop() == 7
    assert len(heap) == 0


def test_sorted_descending_leaves_heap_intact():
    values = [4, 9, 1, 7, 3, 8]
    heap = MaxHeap(values)
    before = list(heap)
    assert heap.sorted_descending() == sorted(values, reverse=True)
    assert list(heap) == before


def test_levels_match_positions():
    heap = MaxHeap(range(15))
    levels = heap.levels()
    assert [v for v, _ in levels] == list(heap)
    depths = [d for _, d in levels]
    assert depths[0] == 0
    assert depths == sorted(depths)
    for depth in set(depths):
        assert depths.count(depth) == 2 ** depth


@pytest.mark.parametrize("seed", range(6))
def test_heapsort_sorts(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 70))]
    assert heapsort(values) == sorted(values)


def test_heapsort_does_not_modify_input():
    values = [3, 1, 2]
    heapsort(values)
    assert values == [3, 1, 2]


def test_heapsort_empty_and_single():
    assert heapsort([]) == []
    assert heapsort([5]) == [5]


def test_extraction_order_is_descending():
    values = [12, 5, 30, 5, 18, 1]
    assert heap_extraction_order(values) == sorted(values, reverse=True)
    assert heap_extraction_order([]) == []