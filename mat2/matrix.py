#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Dense two-dimensional matrix over a generic element type.

Mat2 owns a rectangular list-of-lists storage. Every public mutation checks its
arguments before writing, so a rejected call never leaves a half-modified matrix:
index errors raise, shape mismatches of the append/augment family return False.

Example:
    >>> from mat2 import Mat2
    >>> x = Mat2.from_list([[1, 2], [3, 4]])
    >>> x.swap_rows(0, 1)
    >>> x.get_row(0)
    (3, 4)
"""

import copy
import logging
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

import numpy as np
from scipy import sparse
from sympy import Matrix as SympyMatrix

from .element_math import ElementMath, SupportsDiv, SupportsMul
from .names import RATIONAL, MAX_PRECISION, MAX_DENOM, CONVERSION_KEYS, \
                   DEFAULT_MAX_PRECISION, DEFAULT_MAX_DENOM
from .views import RowIterator, ColumnIterator

LOG = logging.getLogger(__name__)

T = TypeVar('T')


class Mat2(Generic[T]):
    """
    A two-dimensional matrix.

    The storage is a list of rows, each row a list of exactly cols elements.
    Construct instances with Mat2.new, Mat2.new_with or Mat2.from_list.
    """

    __hash__ = None

    def __init__(self, data: List[List[T]], rows: int, cols: int):
        # INVARIANT: len(data) == rows, all(len(r) == cols for r in data)
        # Callers hand over ownership of data, nothing else may keep a reference to it.
        self._data = data
        self._rows = rows
        self._cols = cols
        self._version = 0

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, rows: int, cols: int, default: Callable[[], T] = int) -> 'Mat2[T]':
        """
        Create a new (rows x cols) matrix filled with default().

        Args:
            rows: Number of rows
            cols: Number of columns
            default: Zero-argument factory for the fill value, e.g. int, float or Fraction

        Raises:
            ValueError: If a count is negative
        """
        _check_counts(rows, cols)
        return cls([[default() for _ in range(cols)] for _ in range(rows)], rows, cols)

    @classmethod
    def new_with(cls, rows: int, cols: int, f: Callable[[int, int], T]) -> 'Mat2[T]':
        """
        Create a new (rows x cols) matrix, using f to create each element.

        f is given the coordinate (row, column) of each element it is constructing.
        """
        _check_counts(rows, cols)
        return cls([[f(i, j) for j in range(cols)] for i in range(rows)], rows, cols)

    @classmethod
    def from_list(cls, m: Sequence[Sequence[T]]) -> Optional['Mat2[T]']:
        """
        Create a new matrix from a nested sequence.

        Returns None if the sequence is empty, if its rows are empty, or if the rows
        don't all have the same length. The rows are copied.
        """
        n = len(m)
        if n == 0:
            return None
        length = len(m[0])
        if length == 0 or any(len(r) != length for r in m):
            LOG.debug('from_list: rejected rows of lengths %s', [len(r) for r in m])
            return None
        return cls([list(r) for r in m], n, length)

    @classmethod
    def identity(cls, size: int, zero: Any = 0, one: Any = 1) -> 'Mat2':
        """Create a (size x size) identity matrix."""
        return cls.new_with(size, size, lambda i, j: one if i == j else zero)

    @classmethod
    def from_numpy(cls, array: np.ndarray, **kwargs) -> 'Mat2':
        """
        Create a Mat2 from a two-dimensional numpy array.

        Args:
            array: Numpy array to convert

            rational (bool):
                If True, convert every entry to fractions.Fraction (default False)

            max_precision (int), max_denom (int):
                Bounds for the float-to-rational conversion

        Raises:
            ValueError: If the array is not two-dimensional or has an empty dimension
        """
        array = np.asarray(array)
        if array.ndim != 2 or 0 in array.shape:
            raise ValueError(f"Expected a non-empty 2-D array, got shape {array.shape}")
        convert = _converter(**kwargs)
        rows, cols = array.shape
        return cls.new_with(rows, cols, lambda i, j: convert(array[i, j]))

    @classmethod
    def from_sparse(cls, sparse_matrix: sparse.spmatrix, **kwargs) -> 'Mat2':
        """
        Create a Mat2 from a scipy sparse matrix. Entries missing from the sparse structure are zero.

        Accepts the same keyword options as from_numpy.
        """
        rows, cols = sparse_matrix.shape
        if rows == 0 or cols == 0:
            raise ValueError(f"Expected a non-empty sparse matrix, got shape {sparse_matrix.shape}")
        convert = _converter(**kwargs)
        zero = convert(sparse_matrix.dtype.type(0))
        mat = cls.new_with(rows, cols, lambda i, j: zero)
        # duplicate coordinates of an uncanonicalised COO matrix add up, as in toarray()
        coo = sparse_matrix.tocoo(copy=True)
        coo.sum_duplicates()
        for i, j, v in zip(coo.row, coo.col, coo.data):
            mat._data[int(i)][int(j)] = convert(v)
        return mat

    @classmethod
    def from_sympy(cls, matrix: SympyMatrix) -> Optional['Mat2']:
        """Create a Mat2 from a sympy Matrix. Returns None for an empty matrix."""
        return cls.from_list(matrix.tolist())

    # -------------------------------------------------------------------------
    # Shape and element access
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows"""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns"""
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, cols), in numpy order"""
        return self._rows, self._cols

    @property
    def version(self) -> int:
        """Modification counter, increased by every mutating call. Views compare it to detect changes."""
        return self._version

    def dimension(self) -> Tuple[int, int]:
        """Return the dimensions of the matrix as (cols, rows). Note the column count comes first."""
        return self._cols, self._rows

    def get(self, i: int, j: int) -> T:
        """Get the element at row i, column j (both starting at 0). Raises IndexError if out of bounds."""
        self._check_row(i)
        self._check_col(j)
        return self._data[i][j]

    def get_opt(self, i: int, j: int) -> Optional[T]:
        """Get the element at row i, column j. Returns None if i or j are out of bounds."""
        if i < 0 or j < 0 or i >= self._rows or j >= self._cols:
            return None
        return self._data[i][j]

    def get_row(self, i: int) -> Tuple[T, ...]:
        """Get the row at i as a tuple. Raises IndexError if i is out of bounds."""
        self._check_row(i)
        return tuple(self._data[i])

    def get_row_opt(self, i: int) -> Optional[Tuple[T, ...]]:
        """Get the row at i as a tuple. Returns None if i is out of bounds."""
        if 0 <= i < self._rows:
            return tuple(self._data[i])
        return None

    def get_column(self, j: int) -> Tuple[T, ...]:
        """Get column j as a tuple. Raises IndexError if j is out of bounds."""
        self._check_col(j)
        return tuple(row[j] for row in self._data)

    def to_list(self) -> List[List[T]]:
        """Copy of the storage as a list of lists."""
        return [list(row) for row in self._data]

    # -------------------------------------------------------------------------
    # Structural mutation
    # -------------------------------------------------------------------------

    def swap_rows(self, i: int, j: int):
        """Swap two rows. Raises IndexError if either of the indices is out of bounds."""
        self._check_row(i)
        self._check_row(j)
        if i == j:
            return
        self._data[i], self._data[j] = self._data[j], self._data[i]
        self._touch()

    def set_row(self, i: int, r: Sequence[T]):
        """
        Replace the row at i with a copy of r.

        Raises:
            IndexError: If i is out of bounds
            ValueError: If r does not have cols elements
        """
        self._check_row(i)
        if len(r) != self._cols:
            raise ValueError(f"Row length {len(r)} does not match column count {self._cols}")
        self._data[i] = list(r)
        self._touch()

    def append_column(self, column: Sequence[T]) -> bool:
        """Append a column to the matrix. Returns True if the insert succeeded, False otherwise."""
        if len(column) != self._rows:
            LOG.debug('append_column: %d values for %d rows', len(column), self._rows)
            return False
        for row, item in zip(self._data, column):
            row.append(item)
        self._cols += 1
        self._touch()
        return True

    def append_row(self, row: Sequence[T]) -> bool:
        """Append a row to the matrix. Returns True if the insert succeeded, False otherwise."""
        if len(row) != self._cols:
            LOG.debug('append_row: %d values for %d columns', len(row), self._cols)
            return False
        self._data.append(list(row))
        self._rows += 1
        self._touch()
        return True

    def augment(self, other: 'Mat2[T]') -> bool:
        """
        Augment this matrix with another one: append the columns of other to this matrix.

        On success other is consumed and left as an empty 0 x 0 matrix. On a row count
        mismatch nothing changes and other stays usable.

        Returns:
            True if the augment succeeded, False otherwise
        """
        if other is self or other._rows != self._rows:
            LOG.debug('augment: cannot append %d rows to %d rows', other._rows, self._rows)
            return False
        for row, extra in zip(self._data, other._data):
            row.extend(extra)
        self._cols += other._cols
        self._touch()
        other._data = []
        other._rows = 0
        other._cols = 0
        other._touch()
        return True

    # -------------------------------------------------------------------------
    # Row algebra
    # -------------------------------------------------------------------------

    def scale_row(self, i: int, a: SupportsMul):
        """Scale row i by the scalar a. Raises IndexError if i is out of bounds."""
        self._check_row(i)
        self._data[i] = [x * a for x in self._data[i]]
        self._touch()

    def divide_row(self, i: int, d: SupportsDiv):
        """
        Divide every element of row i by d.

        Same as scaling by the inverse of d, but x / x is exactly one for floats as well.
        Raises IndexError if i is out of bounds; errors of the division propagate unchanged.
        """
        self._check_row(i)
        self._data[i] = [x / d for x in self._data[i]]
        self._touch()

    def add_scaled(self, target: int, source: int, a: SupportsMul):
        """
        Add row source scaled by a to row target: target = source * a + target.

        Raises IndexError if either of the indices is out of bounds.
        """
        self._check_row(target)
        self._check_row(source)
        src = self._data[source]
        self._data[target] = [x * a + y for x, y in zip(src, self._data[target])]
        self._touch()

    # -------------------------------------------------------------------------
    # Gauss-Jordan elimination
    # -------------------------------------------------------------------------

    def reduce(self, **kwargs) -> List[int]:
        """
        Do Gauss-Jordan elimination on this matrix to convert it into Reduced Row-Echelon Form.

        Accepts the keyword options zero and one. Returns the pivot columns.
        """
        return _gauss().reduce(self, **kwargs)

    def is_rref(self, **kwargs) -> bool:
        """Test if this matrix is in Reduced Row-Echelon Form."""
        return _gauss().is_rref(self, **kwargs)

    def rank(self, **kwargs) -> int:
        """Rank of the matrix, computed on a copy."""
        return _gauss().rank(self, **kwargs)

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def row_iter(self) -> RowIterator[T]:
        """Iterate over the rows of a matrix."""
        return RowIterator(self)

    def column_iter(self, col: int) -> ColumnIterator[T]:
        """
        Iterate over the items of column col (0-based) of a matrix.

        An out-of-range column yields nothing.
        """
        return ColumnIterator(self, col)

    def __iter__(self) -> RowIterator[T]:
        return self.row_iter()

    def __len__(self) -> int:
        return self._rows

    # -------------------------------------------------------------------------
    # Copies and conversion
    # -------------------------------------------------------------------------

    def copy(self) -> 'Mat2[T]':
        """Create a deep copy of the matrix."""
        return Mat2(copy.deepcopy(self._data), self._rows, self._cols)

    def transpose(self) -> 'Mat2[T]':
        """Return transposed matrix."""
        return Mat2.new_with(self._cols, self._rows, lambda i, j: self._data[j][i])

    def to_numpy(self, as_float: bool = False) -> np.ndarray:
        """
        Convert to numpy array.

        Args:
            as_float: If True, convert to float array; if False, return object array with the elements
        """
        if as_float:
            result = np.zeros((self._rows, self._cols), dtype=float)
            for i, row in enumerate(self._data):
                for j, val in enumerate(row):
                    result[i, j] = float(val)
        else:
            result = np.empty((self._rows, self._cols), dtype=object)
            for i, row in enumerate(self._data):
                for j, val in enumerate(row):
                    result[i, j] = val
        return result

    def to_sympy(self) -> SympyMatrix:
        """Convert to a sympy Matrix."""
        return SympyMatrix(self.to_list())

    # -------------------------------------------------------------------------
    # Output and comparison
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        lines = ['[']
        lines.extend(' '.join(str(it) for it in row) for row in self._data)
        lines.append(']')
        return '\n'.join(lines) + '\n'

    def __repr__(self) -> str:
        return f"Mat2(rows={self._rows}, cols={self._cols}, data={self._data!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat2):
            return NotImplemented
        return self._rows == other._rows and self._cols == other._cols and self._data == other._data

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _check_row(self, i: int):
        if not 0 <= i < self._rows:
            raise IndexError(f"row index {i} out of range for {self._rows} rows")

    def _check_col(self, j: int):
        if not 0 <= j < self._cols:
            raise IndexError(f"column index {j} out of range for {self._cols} columns")

    def _touch(self):
        self._version += 1


def _gauss():
    # gauss imports this module, so bind it on first use
    from .gauss import GaussJordan
    return GaussJordan


def _check_counts(rows: int, cols: int):
    if rows < 0:
        raise ValueError(f"negative row count: {rows}")
    if cols < 0:
        raise ValueError(f"negative column count: {cols}")


def _converter(**kwargs) -> Callable[[Any], Any]:
    """Element conversion used by from_numpy and from_sparse."""
    for key in kwargs:
        if key not in CONVERSION_KEYS:
            raise ValueError("Key " + key + " is not supported.")
    if not kwargs.get(RATIONAL, False):
        return lambda v: v.item() if isinstance(v, np.generic) else v
    max_precision = kwargs.get(MAX_PRECISION, DEFAULT_MAX_PRECISION)
    max_denom = kwargs.get(MAX_DENOM, DEFAULT_MAX_DENOM)
    return lambda v: ElementMath.to_fraction(v, max_precision, max_denom)
