# EntropyTree/entropy_tree/tree.py
import time
from collections import namedtuple

import numpy as np

from .matrix import Matrix, split_features_and_labels
from .utils import (
    LengthMismatchError,
    class_counts,
    coerce_labels,
)
from .stopping import check_pre_split_stopping_conditions, check_post_split_stopping_condition
from .splitting import find_best_split_across_columns, partition_indices

DEFAULT_MAX_DEPTH = 3

TreeConfig = namedtuple('TreeConfig', ['max_depth'], defaults=(DEFAULT_MAX_DEPTH,))


class Node:
    """
    Internal node of a fitted tree. Rows go left when row[feature_index] < threshold.

    A child of None is a leaf. left_counts and right_counts hold the
    (num_true, num_false) label counts of the training rows routed to each side.
    """

    def __init__(self, feature_index, entropy, threshold, depth, left_counts, right_counts,
                 left=None, right=None):
        self.feature_index = feature_index
        self.entropy = entropy
        self.threshold = threshold
        self.depth = depth
        self.left_counts = left_counts
        self.right_counts = right_counts
        self.left = left
        self.right = right

    @property
    def num_samples(self):
        return sum(self.left_counts) + sum(self.right_counts)

    def to_dict(self):
        return {
            'feature_index': self.feature_index,
            'entropy': self.entropy,
            'threshold': self.threshold,
            'left': self.left.to_dict() if self.left is not None else None,
            'right': self.right.to_dict() if self.right is not None else None,
        }

    def _key(self):
        return (
            self.feature_index,
            self.entropy,
            self.threshold,
            self.left._key() if self.left is not None else None,
            self.right._key() if self.right is not None else None,
        )

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self._key() == other._key()

    # Nodes are immutable once built.
    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (f"Node(depth={self.depth}, feature_index={self.feature_index}, "
                f"threshold={self.threshold}, entropy={self.entropy:.4f}, samples={self.num_samples})")


def _majority_label(counts):
    num_true, num_false = counts
    return num_true > num_false


class EntropyDecisionTree:
    def __init__(self, max_depth=None, verbose=False):
        if max_depth is not None and (isinstance(max_depth, bool) or not isinstance(max_depth, (int, np.integer))):
            raise ValueError(f"max_depth must be an integer, got {max_depth!r}.")
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}.")
        self.config = TreeConfig(max_depth=int(max_depth or DEFAULT_MAX_DEPTH))
        self.verbose = verbose

        self.root = None
        self.is_fitted = False
        self.feature_names = []
        self.training_counts = (0, 0)

    @property
    def max_depth(self):
        return self.config.max_depth

    def fit(self, x, y):
        """
        Grows a tree from feature data x and boolean labels y.

        Args:
            x: Matrix, 2-D numpy array, nested lists or Pandas DataFrame of numeric features.
            y: Labels, one per row of x; coerced to booleans.

        Returns:
            Node or None: The root of the fitted tree. None when no split was made at the root.

        Raises:
            LengthMismatchError: If y does not have one label per row of x.
        """
        if self.verbose:
            fit_start_time = time.time()

        x = Matrix.from_data(x)
        y = coerce_labels(y)
        if y.size != x.num_rows:
            raise LengthMismatchError(f"Feature matrix has {x.num_rows} rows but {y.size} labels were given.")

        if self.verbose:
            print(f"EntropyDecisionTree.fit started. Data has {x.num_rows} rows and {x.num_cols} features.")

        self.feature_names = list(x.feature_names)
        self.training_counts = class_counts(y)
        self.root = self._induce(x, y, 0)
        self.is_fitted = True

        if self.verbose:
            fit_end_time = time.time()
            print(f"EntropyDecisionTree.fit completed in {fit_end_time - fit_start_time:.4f}s. "
                  f"Total nodes: {self.count_nodes()}")
        return self.root

    def _induce(self, x, y, depth):
        indent = "  " * (depth + 1)
        num_rows = x.num_rows

        stop_reason = check_pre_split_stopping_conditions(
            node_num_samples=num_rows, current_depth=depth, max_depth=self.max_depth
        )
        if stop_reason:
            if self.verbose: print(f"{indent}Leaf at depth {depth} ({num_rows} samples). Reason: {stop_reason}")
            return None

        if self.verbose: print(f"{indent}Processing node at depth {depth}: {num_rows} samples.")
        best_split = find_best_split_across_columns(
            x, y, verbose=self.verbose, node_depth_for_logs=depth
        )

        stat_stop_reason = check_post_split_stopping_condition(best_split)
        if stat_stop_reason:
            if self.verbose: print(f"{indent}Leaf at depth {depth}. Reason: {stat_stop_reason}")
            return None

        feature_index = best_split['feature_index']
        threshold = best_split['threshold']
        left_indices, right_indices = partition_indices(x.col_subset([feature_index]), threshold)

        if self.verbose:
            print(f"{indent}SPLIT on {self.feature_names[feature_index]} < {threshold}: "
                  f"{left_indices.size} left, {right_indices.size} right.")

        left_labels, right_labels = y[left_indices], y[right_indices]
        left_child = self._induce(x.row_subset(left_indices), left_labels, depth + 1)
        right_child = self._induce(x.row_subset(right_indices), right_labels, depth + 1)

        return Node(
            feature_index=feature_index,
            entropy=best_split['entropy'],
            threshold=threshold,
            depth=depth,
            left_counts=class_counts(left_labels),
            right_counts=class_counts(right_labels),
            left=left_child,
            right=right_child,
        )

    def _traverse_tree(self, node, row):
        goes_left = row[node.feature_index] < node.threshold
        child = node.left if goes_left else node.right
        if child is None:
            return _majority_label(node.left_counts if goes_left else node.right_counts)
        return self._traverse_tree(child, row)

    def predict(self, x):
        """
        Predicts a boolean label per row by walking the split tests from the root.
        Reaching an empty child slot yields the majority training label of the rows
        that were routed there (ties predict False).
        """
        if not self.is_fitted: raise ValueError("Tree has not been fitted yet.")

        x = Matrix.from_data(x)
        if x.num_rows and x.num_cols != len(self.feature_names):
            raise ValueError(f"Expected {len(self.feature_names)} features, got {x.num_cols}.")

        if self.root is None:
            return np.full(x.num_rows, _majority_label(self.training_counts), dtype=bool)
        return np.array([self._traverse_tree(self.root, row) for row in x.values], dtype=bool)

    def depth(self, node=None):
        """Number of node levels on the longest path from the root (0 for an empty tree)."""
        if node is None:
            node = self.root
            if node is None:
                return 0
        child_depths = [self.depth(child) for child in (node.left, node.right) if child is not None]
        return 1 + max(child_depths, default=0)

    def count_nodes(self, node=None):
        if node is None:
            node = self.root
            if node is None:
                return 0
        return 1 + sum(self.count_nodes(child) for child in (node.left, node.right) if child is not None)

    def get_params(self, deep=True):
        return {
            'max_depth': self.max_depth,
            'verbose': self.verbose
        }

    def _print_leaf(self, counts, indent):
        print(f"{indent}Leaf: true={counts[0]}, false={counts[1]} -> {_majority_label(counts)}")

    def print_tree(self, node=None, indent=""):
        if node is None:
            node = self.root
            if node is None:
                self._print_leaf(self.training_counts, indent)
                return

        feature = self.feature_names[node.feature_index] if self.feature_names else f"x{node.feature_index}"
        print(f"{indent}Split: {feature} < {node.threshold} (entropy={node.entropy:.4f}) | N={node.num_samples}")

        branches = ((node.left, node.left_counts, "  |--L: "), (node.right, node.right_counts, "  +--R: "))
        for child, counts, prefix in branches:
            if child is None:
                self._print_leaf(counts, indent + prefix)
            else:
                self.print_tree(child, indent + prefix)

    def __repr__(self):
        return f"EntropyDecisionTree(max_depth={self.max_depth}, fitted={self.is_fitted})"


if __name__ == '__main__':
    sample_data = [
        [1, 2, 3, True],
        [0, 1, 0, False],
        [2, 3, 1, True],
        [2, 1, 2, False],
        [1, 2, 0, False],
        [3, 2, 1, True],
        [0, 0, 0, False],
        [2, 3, 3, True],
        [3, 2, 2, True],
    ]
    features, labels = split_features_and_labels(sample_data)

    tree = EntropyDecisionTree()
    root = tree.fit(features, labels)
    print(root)
    tree.print_tree()
    print(f"Training accuracy: {np.mean(tree.predict(features) == labels):.3f}")
