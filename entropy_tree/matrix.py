# EntropyTree/entropy_tree/matrix.py
import numpy as np

from .utils import InvalidInputError, coerce_labels, is_pandas_dataframe


class Matrix:
    """
    Dense 2-D numeric matrix with index-list slicing.

    Wraps a float numpy array of shape (rows, cols). Subsets are always returned
    as new Matrix objects; the wrapped array is never modified in place.
    """

    def __init__(self, values, feature_names=None):
        values = np.asarray(values, dtype=float)
        if values.ndim != 2:
            raise InvalidInputError(f"Matrix data must be two-dimensional, got shape {values.shape}.")
        self.values = values
        if feature_names is None:
            feature_names = [f"x{j}" for j in range(values.shape[1])]
        if len(feature_names) != values.shape[1]:
            raise ValueError(
                f"Got {len(feature_names)} feature names for {values.shape[1]} columns."
            )
        self.feature_names = list(feature_names)

    @classmethod
    def from_data(cls, data):
        """
        Builds a Matrix from another Matrix, a numpy array, nested lists or a
        Pandas DataFrame. DataFrame column names are kept as feature names.
        """
        if isinstance(data, Matrix):
            return data
        if is_pandas_dataframe(data):
            return cls(data.to_numpy(dtype=float), feature_names=[str(c) for c in data.columns])
        if isinstance(data, (list, tuple)) and len(data) == 0:
            return cls(np.empty((0, 0), dtype=float))
        if not isinstance(data, (list, tuple, np.ndarray)):
            raise InvalidInputError(
                f"Input data must be a Matrix, numpy array, nested list or Pandas DataFrame, got {type(data).__name__}."
            )
        return cls(data)

    def size(self):
        """Returns (rows, cols)."""
        rows, cols = self.values.shape
        return rows, cols

    @property
    def num_rows(self):
        return self.values.shape[0]

    @property
    def num_cols(self):
        return self.values.shape[1]

    def row_subset(self, indices):
        indices = np.asarray(indices, dtype=int)
        return Matrix(self.values[indices, :].reshape(indices.size, self.num_cols), self.feature_names)

    def col_subset(self, indices):
        indices = np.asarray(indices, dtype=int)
        names = [self.feature_names[j] for j in indices.tolist()]
        return Matrix(self.values[:, indices].reshape(self.num_rows, indices.size), names)

    def column(self, index):
        """Returns column `index` as a flat numpy array (a copy)."""
        return self.values[:, index].copy()

    def less_than(self, value):
        """Element-wise `self < value`, as a boolean array of the same shape."""
        return self.values < value

    def to_flat_list(self):
        """Row-major flattening into a plain list."""
        return self.values.reshape(-1).tolist()

    def __len__(self):
        return self.num_rows

    def __repr__(self):
        rows, cols = self.size()
        return f"Matrix(rows={rows}, cols={cols}, features={self.feature_names})"


def split_features_and_labels(data, label_column=-1):
    """
    Separates a matrix whose labels are attached as one of its columns.

    Args:
        data: Anything Matrix.from_data accepts, e.g. rows of [f0, f1, f2, label].
        label_column (int): Index of the label column. Defaults to the last one.

    Returns:
        tuple: (Matrix of the remaining columns, boolean label array)
    """
    full = Matrix.from_data(data)
    rows, cols = full.size()
    if cols == 0:
        raise InvalidInputError("Cannot split labels from a matrix with no columns.")
    label_column = label_column % cols
    feature_indices = [j for j in range(cols) if j != label_column]
    features = full.col_subset(feature_indices)
    labels = coerce_labels(full.column(label_column))
    return features, labels
