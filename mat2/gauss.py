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
Gauss-Jordan elimination and the Reduced Row-Echelon Form test.

Both operate on any Mat2 whose elements behave like a field: equality, the
identities zero and one, addition, multiplication, division and negation. The
identities are taken from the 'zero' and 'one' keyword options or derived from
the type of the first entry (see ElementMath.identities). Exact results need an
exact element type such as fractions.Fraction or sympy.Rational; with floats,
rounding can leave tiny nonzero entries behind.
"""

import logging
from typing import Any, List, Optional, Sequence

from .element_math import ElementMath, SupportsNeg
from .matrix import Mat2

LOG = logging.getLogger(__name__)


class GaussJordan:
    """
    Gauss-Jordan operations on Mat2 instances.

    reduce() only uses the public row operations of Mat2 (swap_rows, divide_row,
    add_scaled), is_rref() only reads the matrix.
    """

    @staticmethod
    def reduce(matrix: Mat2, **kwargs) -> List[int]:
        """
        Bring matrix into Reduced Row-Echelon Form, in place.

        Columns are processed left to right. The first row at or below the current
        pivot row with a nonzero entry becomes the pivot row, is divided by its pivot
        and used to clear the column in all other rows.

        Args:
            matrix: Mat2 to reduce (modified in place)

            zero, one (optional):
                Additive and multiplicative identity of the element type

        Returns:
            Pivot columns in increasing order, their number is the rank
        """
        rows, cols = matrix.rows, matrix.cols
        if rows == 0 or cols == 0:
            return []
        zero, one = ElementMath.identities(matrix.get(0, 0), **kwargs)
        limit = min(rows, cols)
        pivot_cols = []
        r = 0
        for j in range(cols):
            if r == limit:
                break
            pivot = _find_pivot(matrix, j, r, zero)
            if pivot is None:
                LOG.debug('reduce: matrix is zeros in col %d from row %d', j, r)
                continue
            if pivot != r:
                matrix.swap_rows(pivot, r)
            pivot_val = matrix.get(r, j)
            if pivot_val != one:
                matrix.divide_row(r, pivot_val)
            LOG.debug('reduce: pivot in row %d, col %d (was %s)', r, j, pivot_val)
            for k in range(rows):
                if k == r:
                    continue
                val = matrix.get(k, j)
                if val != zero:
                    matrix.add_scaled(k, r, _negate(val))
            pivot_cols.append(j)
            r += 1
        return pivot_cols

    @staticmethod
    def is_rref(matrix: Mat2, **kwargs) -> bool:
        """
        Test if matrix is in Reduced Row-Echelon Form. The matrix is not modified.

        The conditions are checked in this order:
        1. Rows where every entry is zero lie below all rows with a nonzero entry.
        2. The leftmost nonzero entry of each row is one.
        3. The leading one of a row is strictly to the right of the leading one of the row above.
        4. The leading one of a row is the only nonzero entry in its column.
        """
        if matrix.rows == 0 or matrix.cols == 0:
            return True
        zero, one = ElementMath.identities(matrix.get(0, 0), **kwargs)

        seen_all_zero = False
        for rowidx, row in enumerate(matrix.row_iter()):
            if _leading_index(row, zero) is None:
                seen_all_zero = True
            elif seen_all_zero:
                LOG.debug('is_rref: all-zero rows not at end, row %d', rowidx)
                return False

        last_colidx = -1
        for rowidx, row in enumerate(matrix.row_iter()):
            leftmostidx = _leading_index(row, zero)
            if leftmostidx is None:
                continue
            if row[leftmostidx] != one:
                LOG.debug('is_rref: first non-zero item of row %d is %s, not one', rowidx, row[leftmostidx])
                return False
            if leftmostidx <= last_colidx:
                LOG.debug('is_rref: leading one of row %d in col %d, not right of col %d', rowidx, leftmostidx,
                          last_colidx)
                return False
            last_colidx = leftmostidx
            for colidx, colval in enumerate(matrix.column_iter(leftmostidx)):
                if colidx != rowidx and colval != zero:
                    LOG.debug('is_rref: col %d of leading one in row %d has %s in row %d', leftmostidx, rowidx,
                              colval, colidx)
                    return False
        return True

    @staticmethod
    def rank(matrix: Mat2, **kwargs) -> int:
        """Rank of matrix. The reduction runs on a copy, matrix is not modified."""
        return len(GaussJordan.reduce(matrix.copy(), **kwargs))


def _find_pivot(matrix: Mat2, col: int, start: int, zero: Any) -> Optional[int]:
    for i in range(start, matrix.rows):
        if matrix.get(i, col) != zero:
            return i
    return None


def _leading_index(row: Sequence, zero: Any) -> Optional[int]:
    for idx, val in enumerate(row):
        if val != zero:
            return idx
    return None


def _negate(val: SupportsNeg) -> Any:
    return -val
