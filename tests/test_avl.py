import math
import random

from structkit.avl import AVLTree

SAMPLE = [20, 10, 30, 5, 15, 25, 35]


def test_sample_inorder_is_sorted():
    tree = AVLTree(SAMPLE)
    assert list(tree) == sorted(SAMPLE)
    assert len(tree) == len(SAMPLE)


def test_sample_delete_and_search():
    tree = AVLTree(SAMPLE)
    tree.delete(10)
    assert list(tree) == sorted(k for k in SAMPLE if k != 10)
    assert 15 in tree
    assert 10 not in tree
    assert len(tree) == len(SAMPLE) - 1


def test_empty_tree():
    tree = AVLTree()
    assert list(tree) == []
    assert len(tree) == 0
    assert tree.height() == 0
    assert 1 not in tree


def test_single_key_height():
    tree = AVLTree([42])
    assert tree.height() == 1
    assert list(tree) == [42]


def test_sorted_inserts_make_perfect_tree():
    tree = AVLTree(range(1, 8))
    assert tree.height() == 3
    assert list(tree) == list(range(1, 8))


def test_duplicates_are_ignored():
    tree = AVLTree([5, 5, 3, 3, 7])
    assert list(tree) == [3, 5, 7]
    assert len(tree) == 3


def test_delete_missing_key_changes_nothing():
    tree = AVLTree(SAMPLE)
    tree.delete(999)
    assert list(tree) == sorted(SAMPLE)
    assert len(tree) == len(SAMPLE)


def test_delete_from_empty_tree():
    tree = AVLTree()
    tree.delete(1)
    assert len(tree) == 0
    assert list(tree) == []


def test_delete_all_keys_empties_tree():
    tree = AVLTree(SAMPLE)
    for key in SAMPLE:
        tree.delete(key)
    assert list(tree) == []
    assert tree.height() == 0


def _avl_height_bound(n):
    return 1.4405 * math.log2(n + 2) - 0.3277


def test_height_stays_logarithmic_under_random_use():
    rng = random.Random(1234)
    tree = AVLTree()
    model = set()
    for _ in range(2000):
        key = rng.randrange(500)
        if rng.random() < 0.65:
            tree.insert(key)
            model.add(key)
        else:
            tree.delete(key)
            model.discard(key)
        assert tree.height() <= _avl_height_bound(len(model)) + 1e-9
    assert list(tree) == sorted(model)
    assert len(tree) == len(model)
    assert all(key in tree for key in model)
    assert all(key not in tree for key in set(range(500)) - model)


def test_ascending_inserts_stay_balanced():
    tree = AVLTree(range(1000))
    assert tree.height() <= _avl_height_bound(1000)
    assert list(tree) == list(range(1000))


def test_works_with_strings():
    words = ["pear", "apple", "fig", "kiwi"]
    tree = AVLTree(words)
    assert list(tree) == sorted(words)
    assert "fig" in tree