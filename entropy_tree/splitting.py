# EntropyTree/entropy_tree/splitting.py
import time # For performance logging
import numpy as np
from .matrix import Matrix
from .utils import weighted_split_entropy

# Baseline score; weighted binary entropy never exceeds 1.
ENTROPY_SENTINEL = 10.0


def _as_column_matrix(column):
    """Wraps a single feature column (a one-column Matrix or a flat sequence) as an n x 1 Matrix."""
    if isinstance(column, Matrix):
        return column
    return Matrix(np.asarray(column, dtype=float).reshape(-1, 1))


def find_best_split_for_column(
    column,
    labels: np.ndarray,
    feature_name: str = None,
    verbose: bool = False,
    node_depth_for_logs: int = 0
):
    """
    Finds the threshold on a single feature column that minimizes weighted split entropy.

    Every observed value v is tried, in row order, as the rule `column < v`.
    Repeated values are simply scored again. Only a strictly lower score replaces
    the current best, so the first value reaching the minimum wins.

    Args:
        column (Matrix or sequence): One-column Matrix, or flat feature values, for the
            rows of the current node.
        labels (np.ndarray): Boolean labels for the same rows.
        feature_name (str, optional): Used only in verbose output.
        verbose (bool): Flag for detailed logging.
        node_depth_for_logs (int): Depth of the node, for log indentation.

    Returns:
        dict: {'threshold': value or None, 'entropy': float}. An empty column yields
              {'threshold': None, 'entropy': ENTROPY_SENTINEL}.
    """
    best_split = {'threshold': None, 'entropy': ENTROPY_SENTINEL}
    column = _as_column_matrix(column)
    labels = np.asarray(labels, dtype=bool).reshape(-1)
    candidate_values = column.to_flat_list()

    for value in candidate_values:
        predicted_left = column.less_than(value).reshape(-1)
        score = weighted_split_entropy(predicted_left, labels)
        if score < best_split['entropy']:
            best_split['entropy'] = score
            best_split['threshold'] = value

    if verbose:
        indent = "  " * (node_depth_for_logs + 2)
        if best_split['threshold'] is None:
            print(f"{indent}  Column '{feature_name}': no values, no split possible.")
        else:
            print(f"{indent}  Column '{feature_name}': best threshold < {best_split['threshold']} "
                  f"(entropy {best_split['entropy']:.4f}) over {len(candidate_values)} candidate values.")
    return best_split


def find_best_split_across_columns(
    x,
    y,
    verbose: bool = False,
    node_depth_for_logs: int = 0
):
    """
    Searches every feature column, in index order, for the overall best split.

    A column reaching an entropy of exactly 0 is returned immediately, so among
    several perfect splits the lowest column index wins. Otherwise the strictly
    lowest score is kept, with ties going to the earlier column.

    Args:
        x (Matrix): Feature matrix of the current node.
        y (np.ndarray): Boolean labels of the current node.
        verbose (bool): Flag for detailed logging.
        node_depth_for_logs (int): Depth of the node, for log indentation.

    Returns:
        dict: {'feature_index', 'threshold', 'entropy'}. When no column produces a
              score below the sentinel (no columns or no rows), feature_index and
              threshold are None.
    """
    overall_best_split = {'feature_index': None, 'threshold': None, 'entropy': ENTROPY_SENTINEL}
    indent = "  " * (node_depth_for_logs + 1)
    _, num_cols = x.size()

    for feature_idx in range(num_cols):
        if verbose:
            t_col_split_start = time.time()

        column_best_split = find_best_split_for_column(
            column=x.col_subset([feature_idx]),
            labels=y,
            feature_name=x.feature_names[feature_idx],
            verbose=verbose,
            node_depth_for_logs=node_depth_for_logs
        )

        if verbose:
            print(f"{indent}    Column {feature_idx} evaluated in {time.time() - t_col_split_start:.4f}s")

        if column_best_split['entropy'] == 0:
            if verbose:
                print(f"{indent}  Perfect split found on column {feature_idx}; skipping remaining columns.")
            return {
                'feature_index': feature_idx,
                'threshold': column_best_split['threshold'],
                'entropy': column_best_split['entropy']
            }

        if column_best_split['entropy'] < overall_best_split['entropy']:
            overall_best_split = {
                'feature_index': feature_idx,
                'threshold': column_best_split['threshold'],
                'entropy': column_best_split['entropy']
            }

    if verbose:
        if overall_best_split['feature_index'] is None:
            print(f"{indent}  No split candidates found ({num_cols} columns).")
        else:
            print(f"{indent}  Overall best split: column {overall_best_split['feature_index']} "
                  f"< {overall_best_split['threshold']} (entropy {overall_best_split['entropy']:.4f})")
    return overall_best_split


def partition_indices(column, threshold):
    """
    Splits row positions into (left_indices, right_indices) for the rule `column < threshold`,
    keeping the original relative order within each group. `column` is a one-column
    Matrix or a flat sequence of feature values.
    """
    left_mask = _as_column_matrix(column).less_than(threshold).reshape(-1)
    return np.flatnonzero(left_mask), np.flatnonzero(~left_mask)
