# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np

from errors import ShapeMismatchError
from num_gen import generate_checked

class Matrix:
    """
    Dense row-major matrix of float64 values.

    Element (r, c) is stored at data[r * nb_columns + c]. The data is
    read-only once the matrix exists.

    Args:
        nb_rows (int): Number of rows.
        nb_columns (int): Number of columns.
        data (sequence of float): Flat row-major values, nb_rows * nb_columns of them.

    Raises:
        ShapeMismatchError: If the amount of data does not match the dimensions.
    """

    def __init__(self, nb_rows: int, nb_columns: int, data):
        if nb_rows < 0 or nb_columns < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {nb_rows}x{nb_columns}")

        values = np.array(data, dtype=np.float64).reshape(-1)
        if values.shape[0] != nb_rows * nb_columns:
            raise ShapeMismatchError("data", nb_rows * nb_columns, values.shape[0],
                                     f"A {nb_rows}x{nb_columns} matrix needs {nb_rows * nb_columns} "
                                     f"values, got {values.shape[0]}")
        values.flags.writeable = False

        self._nb_rows = nb_rows
        self._nb_columns = nb_columns
        self._data = values

    @classmethod
    def create(cls, nb_rows: int, nb_cols: int, generator) -> "Matrix":
        """
        Builds a matrix filled row-major with values from a number generator.

        Args:
            nb_rows (int): Number of rows.
            nb_cols (int): Number of columns.
            generator (NumberGenerator): Source of the nb_rows * nb_cols values.

        Returns:
            Matrix: The filled matrix.

        Raises:
            GeneratorError: If the generator delivered the wrong number of values.
        """
        return cls(nb_rows, nb_cols, generate_checked(generator, nb_rows * nb_cols))

    @property
    def nb_rows(self):
        return self._nb_rows

    @property
    def nb_columns(self):
        return self._nb_columns

    @property
    def shape(self):
        return self._nb_rows, self._nb_columns

    @property
    def data(self):
        return self._data

    def __getitem__(self, index):
        row, col = index
        if not (0 <= row < self._nb_rows and 0 <= col < self._nb_columns):
            raise IndexError(f"Index ({row}, {col}) out of range for a {self._nb_rows}x{self._nb_columns} matrix")
        return float(self._data[row * self._nb_columns + col])

    def to_numpy(self):
        """Returns a writable 2-D copy of the matrix."""
        return self._data.reshape(self._nb_rows, self._nb_columns).copy()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    def __repr__(self):
        return f"Matrix({self._nb_rows}x{self._nb_columns})"


def _describe(length):
    """Formats a vector length, or the shape of an input that is not a vector."""
    if isinstance(length, tuple):
        return f"an input of shape {length}"
    return f"a vector of {length} elements"


def gemv(matrix: Matrix, x, y) -> np.ndarray:
    """
    General matrix-vector multiply-add, computes matrix * x + y.

    Args:
        matrix (Matrix): m x n matrix.
        x (sequence of float): Column vector of n elements.
        y (sequence of float): Column vector of m elements.

    Returns:
        np.ndarray: New column vector of m elements, the inputs are left untouched.

    Raises:
        ShapeMismatchError: If the matrix columns do not match the length of x
            (checked first) or the matrix rows do not match the length of y.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    x_len = x.shape[0] if x.ndim == 1 else x.shape
    if x.ndim != 1 or x_len != matrix.nb_columns:
        raise ShapeMismatchError("columns", matrix.nb_columns, x_len,
                                 f"Number of columns of matrix and size of first vector must be equal, "
                                 f"got {matrix.nb_columns} columns and {_describe(x_len)}")

    y_len = y.shape[0] if y.ndim == 1 else y.shape
    if y.ndim != 1 or y_len != matrix.nb_rows:
        raise ShapeMismatchError("rows", matrix.nb_rows, y_len,
                                 f"Number of rows of matrix and size of second vector must be equal, "
                                 f"got {matrix.nb_rows} rows and {_describe(y_len)}")

    return matrix.data.reshape(matrix.nb_rows, matrix.nb_columns) @ x + y


def apply_activation_function(fn, x) -> np.ndarray:
    """
    Applies a scalar activation function on each element of a column vector.

    Args:
        fn (ActivationFunction): Activation to apply.
        x (sequence of float): Column vector [x1, ..., xn].

    Returns:
        np.ndarray: Column vector [fn(x1), ..., fn(xn)].
    """
    x = np.asarray(x, dtype=np.float64)
    return np.fromiter((fn.activate(float(value)) for value in x), dtype=np.float64, count=x.shape[0])
