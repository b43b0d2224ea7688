from structkit.sparse import SparseEntry, format_sparse, transpose

MATRIX = [SparseEntry(2, 1, 3), SparseEntry(1, 2, 2), SparseEntry(0, 0, 1)]


def test_double_transpose_is_identity():
    assert transpose(transpose(MATRIX)) == MATRIX


def test_transpose_swaps_and_reverses():
    result = transpose(MATRIX)
    assert [(e.col, e.row, e.value) for e in reversed(result)] == [
        (e.row, e.col, e.value) for e in MATRIX
    ]


def test_transpose_empty():
    assert transpose([]) == []


def test_format_header_only_when_empty():
    assert format_sparse([]) == "Row\tCol\tValue\n"


def test_format_rows():
    text = format_sparse([SparseEntry(1, 2, 2)])
    assert text == "Row\tCol\tValue\n1\t2\t2\n"


def test_format_line_count_matches_entries():
    lines = format_sparse(MATRIX).splitlines()
    assert len(lines) == len(MATRIX) + 1
    assert lines[1].split("\t") == ["2", "1", "3"]