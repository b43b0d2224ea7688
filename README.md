# structkit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `structkit.avl` | `AVLTree`: a height-balanced binary search tree of distinct keys |
| `structkit.avl_balance` | `BalanceFactorTree`: an AVL tree that keeps a balance factor on every node and reports its breadth-first order |
| `structkit.rbtree` | `RedBlackTree` and `Color`: red-black insertion with breadth-first output of values and colours |
| `structkit.heap` | `MaxHeap`, `heapsort`, `heap_extraction_order` |
| `structkit.radix` | `radix_sort`, `radix_passes`, `digit_count` for non-negative integers |
| `structkit.polynomial` | `Polynomial`: add, subtract, multiply, differentiate, drop odd coefficients; `main` for the command line |
| `structkit.bivariate` | `BivariateTerm`, `add_bivariate`, `format_bivariate` for polynomials in x and y |
| `structkit.termmerge` | `add_sorted_terms`: merge two term lists sorted by descending degree |
| `structkit.bignum` | `add_decimal_strings`: add arbitrarily long decimal numbers given as strings |
| `structkit.sparse` | `SparseEntry`, `transpose`, `format_sparse` for triplet-form sparse matrices |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Balanced trees

`AVLTree` stores each key once: inserting a key that is already present, or
deleting one that is absent, leaves the tree unchanged. Iteration yields the
keys in ascending order.

```python
from structkit.avl import AVLTree

tree = AVLTree([20, 10, 30, 5, 15, 25, 35])
tree.delete(10)
print(list(tree))          # [5, 15, 20, 25, 30, 35]
print(15 in tree)          # True
print(len(tree), tree.height())
```

`BalanceFactorTree` also ignores duplicates, and `bfs()` returns its values
level by level, left child before right.

```python
from structkit.avl_balance import BalanceFactorTree

tree = BalanceFactorTree([1, 2, 3])
print(tree.bfs())          # [2, 1, 3]
tree.delete(1)
print(list(tree))          # [2, 3]
```

`RedBlackTree` keeps equal values (they go to the right subtree), so `len`
counts every insertion. `bfs()` returns `(value, Color)` pairs.

```python
from structkit.rbtree import RedBlackTree

rb = RedBlackTree([10, 20, 30])
print(rb.bfs())            # values with their colours, level by level
print(20 in rb, len(rb))
```

### Heaps and sorting

```python
from structkit.heap import MaxHeap, heapsort, heap_extraction_order
from structkit.radix import radix_sort, radix_passes

heap = MaxHeap([3, 9, 4, 7])
print(heap.levels())       # (value, depth) pairs in storage order
print(heap.pop())          # 9; pop() on an empty heap raises IndexError
print(heapsort([5, 1, 4, 2]))               # ascending
print(heap_extraction_order([5, 1, 4, 2]))  # largest first
print(radix_sort([170, 45, 75, 90, 802, 24]))
print(radix_passes([170, 45, 75]))          # the list after each digit pass
```

The radix functions raise `ValueError` for negative numbers.

### Polynomials

Terms are `(coefficient, exponent)` pairs. Terms of equal exponent are
combined, terms that sum to zero are dropped, and iteration goes from the
highest exponent down. `str()` gives forms such as `3x^2 + 5x^1 -6x^0`, and
`0` for the empty polynomial.

```python
from structkit.polynomial import Polynomial

p = Polynomial([(3, 2), (5, 1), (6, 0)])
q = Polynomial([(6, 1), (8, 0)])
print(p + q)
print(p - q)
print(p * q)
print(p.derivative())
print(p.drop_odd_coefficients())   # 6x^0
```

For polynomials in two variables and for plain merges of sorted term lists:

```python
from structkit.bivariate import BivariateTerm, add_bivariate, format_bivariate
from structkit.termmerge import add_sorted_terms

a = [BivariateTerm(5, 0, 0), BivariateTerm(2, 1, 1), BivariateTerm(3, 2, 2)]
b = [BivariateTerm(2, 0, 0), BivariateTerm(1, 1, 1), BivariateTerm(4, 2, 2)]
print(format_bivariate(add_bivariate(a, b)))

print(add_sorted_terms([(3, 2), (1, 0)], [(4, 2), (2, 1)]))
```

`add_bivariate` pushes each merged term onto the front of its result, so the
result comes back in the reverse of the merge order.

### Big numbers and sparse matrices

```python
from structkit.bignum import add_decimal_strings
from structkit.sparse import SparseEntry, transpose, format_sparse

print(add_decimal_strings("99999999999999999999", "1"))

matrix = [SparseEntry(0, 0, 1), SparseEntry(1, 2, 2), SparseEntry(2, 1, 3)]
print(format_sparse(transpose(matrix)))
```

`add_decimal_strings` raises `ValueError` if either string holds anything
other than the digits 0-9. `transpose` returns the swapped entries in reverse
order.

## Command line

Installing the package provides an interactive polynomial calculator:

```
structkit-poly
```

It reads whitespace-separated integers from standard input: the number of
terms of the first polynomial followed by a coefficient and exponent for each
term, then the same for the second polynomial. It then shows a menu: 1 adds,
2 subtracts, 3 multiplies, 4 differentiates the first polynomial, and 5
exits. A non-integer in the input ends the program with an error message and
exit status 1.

## What it does not do

The calculator is the only command. The trees, heaps, radix sort, big-number
addition and sparse matrices are library code only: there is no interactive
prompt for them, and nothing is saved to disk.