# EntropyTree/entropy_tree/utils.py
import math
import warnings
from collections.abc import Mapping

import numpy as np
import pandas as pd


class InvalidInputError(TypeError):
    """Raised when an argument that must be a sequence is not one."""


class LengthMismatchError(ValueError):
    """Raised when paired sequences (predictions and labels, rows and labels) differ in length."""


def is_sequence(obj):
    """
    Checks whether obj is a flat sequence the entropy calculations can iterate over.
    Lists, tuples, 1-D numpy arrays and pandas Series qualify; strings, mappings,
    scalars, multi-dimensional arrays and nested lists do not.
    """
    if isinstance(obj, np.ndarray):
        return obj.ndim == 1
    if isinstance(obj, pd.Series):
        return True
    if isinstance(obj, (str, bytes, Mapping)):
        return False
    if not isinstance(obj, (list, tuple)):
        return False
    return not any(isinstance(item, (list, tuple, np.ndarray, pd.Series)) for item in obj)


def binary_entropy(count_a, count_b):
    """
    Entropy (in bits) of a two-class node with count_a and count_b members.
    A node holding only one class, or nothing at all, has zero entropy.
    """
    if count_a == 0 or count_b == 0:
        return 0.0
    total = count_a + count_b
    p_a = count_a / total
    p_b = count_b / total
    return -p_a * math.log2(p_a) - p_b * math.log2(p_b)


def weighted_split_entropy(predicted_left, true_labels):
    """
    Weighted binary-class entropy of a candidate split.

    Each row is routed left when predicted_left[i] is truthy and right otherwise.
    The entropy of each side is weighted by the fraction of rows it receives:

        score = n_left / n * H(left) + n_right / n * H(right)

    Args:
        predicted_left (sequence of bool): Routing decision per row.
        true_labels (sequence of bool): Ground-truth class per row.

    Returns:
        float: A value in [0, 1]. 0 means every row on each side shares one class.

    Raises:
        InvalidInputError: If either argument is not a sequence.
        LengthMismatchError: If the two sequences differ in length.
    """
    if not is_sequence(predicted_left) or not is_sequence(true_labels):
        raise InvalidInputError(
            f"Expected two sequences, got {type(predicted_left).__name__} and {type(true_labels).__name__}."
        )
    if len(predicted_left) != len(true_labels):
        raise LengthMismatchError(
            f"Predicted split has {len(predicted_left)} entries but there are {len(true_labels)} labels."
        )

    total = len(true_labels)
    if total == 0:
        return 0.0

    left_mask = np.asarray(predicted_left, dtype=bool)
    labels = np.asarray(true_labels, dtype=bool)
    if left_mask.ndim != 1 or labels.ndim != 1:
        raise InvalidInputError(
            f"Expected flat sequences, got {left_mask.ndim}-D and {labels.ndim}-D input."
        )

    left_true = int(np.count_nonzero(left_mask & labels))
    left_false = int(np.count_nonzero(left_mask & ~labels))
    right_true = int(np.count_nonzero(~left_mask & labels))
    right_false = int(np.count_nonzero(~left_mask & ~labels))

    # An empty side contributes exactly zero instead of 0/0.
    score = 0.0
    num_left = left_true + left_false
    if num_left > 0:
        score += num_left / total * binary_entropy(left_true, left_false)
    num_right = right_true + right_false
    if num_right > 0:
        score += num_right / total * binary_entropy(right_true, right_false)
    return score


def class_counts(labels):
    """Returns (num_true, num_false) for a boolean label array."""
    labels = np.asarray(labels, dtype=bool)
    num_true = int(np.count_nonzero(labels))
    return num_true, int(labels.size - num_true)


def coerce_labels(labels):
    """
    Converts a label container (list, tuple, numpy array, (n, 1) column, pandas Series)
    into a flat boolean numpy array. Values other than 0/1/True/False are coerced by
    truthiness with a warning.
    """
    if isinstance(labels, pd.DataFrame):
        if labels.shape[1] != 1:
            raise InvalidInputError(f"Labels must be a single column, got {labels.shape[1]} columns.")
        labels = labels.iloc[:, 0]
    if isinstance(labels, pd.Series):
        labels = labels.to_numpy()
    if not isinstance(labels, (list, tuple, np.ndarray)):
        raise InvalidInputError(f"Labels must be a sequence, got {type(labels).__name__}.")

    raw = np.asarray(labels, dtype=object)
    if raw.ndim == 2 and raw.shape[1] == 1:
        raw = raw.reshape(raw.shape[0])
    if raw.ndim != 1:
        raise InvalidInputError(f"Labels must be one-dimensional, got shape {raw.shape}.")

    non_boolean = [v for v in raw if not (isinstance(v, (bool, np.bool_)) or v in (0, 1))]
    if non_boolean:
        warnings.warn(
            f"{len(non_boolean)} label(s) are not boolean-like (e.g. {non_boolean[0]!r}). "
            "Labels are coerced by truthiness.",
            UserWarning
        )
    return np.array([bool(v) for v in raw], dtype=bool)


def is_pandas_dataframe(data):
    """Checks if the provided data is a Pandas DataFrame."""
    return isinstance(data, pd.DataFrame)
