"""Classic data structures and algorithms: balanced trees, heaps, radix sort, polynomials, big-number addition and sparse matrices."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "avl_balance",
    "bignum",
    "bivariate",
    "heap",
    "polynomial",
    "radix",
    "rbtree",
    "sparse",
    "termmerge",
]