# entropy_tree/__init__.py

"""
Entropy Decision Tree Package

Greedy binary classification trees grown by minimizing weighted class entropy.
"""

from .utils import InvalidInputError, LengthMismatchError, binary_entropy, weighted_split_entropy
from .matrix import Matrix, split_features_and_labels
from .splitting import ENTROPY_SENTINEL, find_best_split_for_column, find_best_split_across_columns
from .tree import DEFAULT_MAX_DEPTH, EntropyDecisionTree, Node, TreeConfig

VERSION = "0.1.0"

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ENTROPY_SENTINEL",
    "EntropyDecisionTree",
    "InvalidInputError",
    "LengthMismatchError",
    "Matrix",
    "Node",
    "TreeConfig",
    "binary_entropy",
    "find_best_split_across_columns",
    "find_best_split_for_column",
    "split_features_and_labels",
    "weighted_split_entropy",
]
