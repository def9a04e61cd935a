import pytest

from algokit.matrix import (
    MaxRow,
    format_matrix,
    matrix_sum,
    max_row_sum,
    multiply,
    transpose,
)

SAMPLE = [[1, 2, 3], [4, 5, 6]]


def test_format_matrix_layout():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"


def test_format_matrix_line_count():
    text = format_matrix(SAMPLE)
    assert text.count("\n") == len(SAMPLE)
    assert text.splitlines()[0].split() == [str(v) for v in SAMPLE[0]]


def test_max_row_sum_is_maximal():
    matrix = [[1, 2], [5, 0], [3, 3], [-4, 1]]
    result = max_row_sum(matrix)
    assert result.total == sum(matrix[result.index])
    assert all(result.total >= sum(row) for row in matrix)


def test_max_row_sum_first_on_tie():
    assert max_row_sum([[1, 1], [2, 0]]) == MaxRow(0, sum([1, 1]))


def test_max_row_sum_all_negative():
    matrix = [[-5, -5], [-1, -2]]
    result = max_row_sum(matrix)
    assert result.total == sum(matrix[1])
    assert result.index == 1


def test_max_row_sum_empty():
    with pytest.raises(ValueError):
        max_row_sum([])


def test_matrix_sum_value():
    assert matrix_sum([[1, 2], [3, 4]]) == 10


def test_matrix_sum_invariant_under_transpose():
    assert matrix_sum(transpose(SAMPLE)) == matrix_sum(SAMPLE)


def test_matrix_sum_empty():
    assert matrix_sum([]) == 0


def test_transpose_round_trip():
    assert transpose(transpose(SAMPLE)) == SAMPLE


def test_transpose_swaps_indices():
    result = transpose(SAMPLE)
    assert len(result) == len(SAMPLE[0])
    assert all(
        result[j][i] == SAMPLE[i][j]
        for i in range(len(SAMPLE))
        for j in range(len(SAMPLE[0]))
    )


def test_transpose_ragged():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_multiply_by_identity():
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert multiply(SAMPLE, identity) == SAMPLE
    assert multiply([[1, 0], [0, 1]], SAMPLE) == SAMPLE


def test_multiply_transpose_rule():
    a = [[1, 2], [3, 4], [5, 6]]
    b = [[7, -1, 0], [2, 3, 4]]
    assert transpose(multiply(a, b)) == multiply(transpose(b), transpose(a))


def test_multiply_shape():
    result = multiply(SAMPLE, transpose(SAMPLE))
    assert len(result) == len(SAMPLE)
    assert all(len(row) == len(SAMPLE) for row in result)
    assert result == transpose(result)


def test_multiply_by_zero_matrix():
    zeros = [[0, 0], [0, 0], [0, 0]]
    assert multiply(SAMPLE, zeros) == [[0, 0], [0, 0]]


def test_multiply_mismatch():
    with pytest.raises(ValueError):
        multiply(SAMPLE, SAMPLE)