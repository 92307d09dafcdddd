# EntropyTree/tests/test_splitting.py
import numpy as np
import pytest

from entropy_tree.matrix import Matrix
from entropy_tree.splitting import (
    ENTROPY_SENTINEL,
    find_best_split_across_columns,
    find_best_split_for_column,
    partition_indices,
)
from entropy_tree.utils import binary_entropy


def test_column_split_finds_perfect_threshold():
    column = np.array([5.0, 1.0, 7.0, 2.0])
    labels = np.array([True, False, True, False])
    best = find_best_split_for_column(column, labels)
    assert best == {'threshold': 5.0, 'entropy': 0.0}


def test_single_valued_column_routes_everything_right():
    column = np.array([4.0, 4.0, 4.0])
    labels = np.array([True, False, False])
    best = find_best_split_for_column(column, labels)
    assert best['threshold'] == 4.0
    assert best['entropy'] == pytest.approx(binary_entropy(1, 2))


def test_empty_column_returns_sentinel():
    best = find_best_split_for_column(np.array([]), np.array([], dtype=bool))
    assert best == {'threshold': None, 'entropy': ENTROPY_SENTINEL}
    assert ENTROPY_SENTINEL > 1


def test_column_split_keeps_first_value_on_ties():
    # Thresholds 3 and 2 both isolate one pure row and score the same.
    column = np.array([3.0, 2.0, 1.0, 2.0])
    labels = np.array([True, False, True, False])
    best = find_best_split_for_column(column, labels)
    assert best['threshold'] == 3.0
    assert best['entropy'] == pytest.approx(3 / 4 * binary_entropy(1, 2))


def test_column_split_threshold_is_plain_python_number():
    best = find_best_split_for_column(np.array([1, 2, 3]), np.array([False, True, True]))
    assert type(best['threshold']) in (int, float)
    assert best['threshold'] == 2


def test_across_columns_short_circuits_on_first_perfect_column():
    x = Matrix([
        [0.0, 1.0, 1.0],
        [0.0, 2.0, 2.0],
        [0.0, 8.0, 8.0],
        [0.0, 9.0, 9.0],
    ])
    labels = np.array([False, False, True, True])
    best = find_best_split_across_columns(x, labels)
    assert best == {'feature_index': 1, 'threshold': 8.0, 'entropy': 0.0}


def test_across_columns_breaks_ties_by_column_order():
    # Columns 0 and 1 are identical, so their best scores tie.
    x = Matrix([
        [1.0, 1.0],
        [2.0, 2.0],
        [3.0, 3.0],
        [4.0, 4.0],
    ])
    labels = np.array([False, True, False, True])
    best = find_best_split_across_columns(x, labels)
    assert best['feature_index'] == 0
    assert 0 < best['entropy'] < 1


def test_across_columns_picks_lowest_entropy_column():
    x = Matrix([
        [1.0, 5.0],
        [2.0, 1.0],
        [3.0, 6.0],
        [4.0, 2.0],
        [5.0, 7.0],
    ])
    labels = np.array([True, False, True, False, False])
    column_scores = [
        find_best_split_for_column(x.column(j), labels)['entropy'] for j in range(2)
    ]
    best = find_best_split_across_columns(x, labels)
    assert best['entropy'] == min(column_scores)
    assert best['feature_index'] == int(np.argmin(column_scores))


def test_across_columns_without_columns_finds_nothing():
    x = Matrix(np.empty((3, 0)))
    best = find_best_split_across_columns(x, np.array([True, False, True]))
    assert best['feature_index'] is None
    assert best['threshold'] is None
    assert best['entropy'] == ENTROPY_SENTINEL


def test_across_columns_without_rows_finds_nothing():
    x = Matrix(np.empty((0, 2)))
    best = find_best_split_across_columns(x, np.array([], dtype=bool))
    assert best['feature_index'] is None


def test_verbose_split_search_prints_progress(capsys):
    x = Matrix([[1.0], [2.0]])
    find_best_split_across_columns(x, np.array([False, True]), verbose=True)
    out = capsys.readouterr().out
    assert "Column 'x0'" in out
    assert "Perfect split found on column 0" in out


def test_partition_indices_preserves_order():
    left, right = partition_indices(np.array([5, 1, 7, 2, 3]), 3)
    assert left.tolist() == [1, 3]
    assert right.tolist() == [0, 2, 4]


def test_partition_indices_accepts_matrix_column():
    x = Matrix([[5.0, 0.0], [1.0, 0.0], [7.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
    left, right = partition_indices(x.col_subset([0]), 3)
    assert left.tolist() == [1, 3]
    assert right.tolist() == [0, 2, 4]


def test_column_split_accepts_matrix_column():
    x = Matrix([[9.0, 5.0], [9.0, 1.0], [9.0, 7.0], [9.0, 2.0]])
    labels = np.array([True, False, True, False])
    from_matrix = find_best_split_for_column(x.col_subset([1]), labels)
    assert from_matrix == find_best_split_for_column(x.column(1), labels)
    assert from_matrix == {'threshold': 5.0, 'entropy': 0.0}
