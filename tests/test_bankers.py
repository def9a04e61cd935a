import pytest

from algokit.bankers import need_matrix, safe_sequence

ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
AVAILABLE = [3, 3, 2]


def _replay(order, allocation, maximum, available):
    need = need_matrix(allocation, maximum)
    free = list(available)
    for process in order:
        if any(w > h for w, h in zip(need[process], free)):
            return False
        free = [h + a for h, a in zip(free, allocation[process])]
    return True


def test_need_matrix_adds_back_to_maximum():
    need = need_matrix(ALLOCATION, MAXIMUM)
    for need_row, held_row, max_row in zip(need, ALLOCATION, MAXIMUM):
        assert [n + h for n, h in zip(need_row, held_row)] == max_row


def test_need_matrix_simple():
    assert need_matrix([[1, 2]], [[4, 2]]) == [[3, 0]]


def test_safe_sequence_classic_example():
    assert safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE) == [1, 3, 0, 2, 4]


def test_safe_sequence_is_permutation_and_replayable():
    order = safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE)
    assert sorted(order) == list(range(len(ALLOCATION)))
    assert _replay(order, ALLOCATION, MAXIMUM, AVAILABLE)


def test_unsafe_state_returns_none():
    assert safe_sequence([[1]], [[3]], [1]) is None


def test_partially_runnable_is_still_unsafe():
    assert safe_sequence([[1, 0], [0, 1]], [[1, 0], [5, 5]], [0, 0]) is None


def test_no_processes_is_safe():
    assert safe_sequence([], [], [1, 2]) == []


def test_inputs_not_modified():
    available = list(AVAILABLE)
    allocation = [row[:] for row in ALLOCATION]
    safe_sequence(allocation, MAXIMUM, available)
    assert available == AVAILABLE
    assert allocation == ALLOCATION


def test_mismatched_process_counts_rejected():
    with pytest.raises(ValueError):
        safe_sequence([[1]], [[1], [2]], [1])


def test_mismatched_resource_counts_rejected():
    with pytest.raises(ValueError):
        safe_sequence([[1, 0]], [[2, 0]], [1])


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        need_matrix([[1, 0], [1]], [[2, 0], [2, 0]])