"""Sparse matrices as lists of (row, col, value) entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SparseEntry:
    """One non-zero element of a sparse matrix."""

    row: int
    col: int
    value: int


def transpose(entries: Iterable[SparseEntry]) -> list[SparseEntry]:
    """Swap row and column of every entry.

    Each swapped entry is pushed onto the front of the result, so the
    entries come back in reverse order.
    """
    return [SparseEntry(e.col, e.row, e.value) for e in reversed(list(entries))]


def format_sparse(entries: Iterable[SparseEntry]) -> str:
    """Render a tab-separated table headed ``Row\\tCol\\tValue``."""
    lines = ["Row\tCol\tValue"]
    lines.extend(f"{e.row}\t{e.col}\t{e.value}" for e in entries)
    return "\n".join(lines) + "\n"