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
"""Row and column iterators over a Mat2"""

from typing import TYPE_CHECKING, Generic, Tuple, TypeVar

if TYPE_CHECKING:
    from .matrix import Mat2

T = TypeVar('T')


class _MatrixView(Generic[T]):
    """Forward-only iterator bound to one matrix.

    The view remembers the modification counter of the matrix when it is created. Once the
    matrix is mutated, a view that is not yet exhausted raises RuntimeError on the next step.
    An exhausted view keeps raising StopIteration.
    """

    def __init__(self, mat: 'Mat2[T]'):
        self._mat = mat
        self._version = mat.version
        self._i = 0
        self._exhausted = False

    def __iter__(self):
        return self

    def _check_version(self):
        if self._mat.version != self._version:
            raise RuntimeError('matrix changed during iteration')

    def _stop(self):
        self._exhausted = True
        raise StopIteration


class RowIterator(_MatrixView[T]):
    """Iterate over the rows of a matrix, each one as an immutable tuple."""

    def __next__(self) -> Tuple[T, ...]:
        if self._exhausted:
            raise StopIteration
        self._check_version()
        row = self._mat.get_row_opt(self._i)
        if row is None:
            self._stop()
        self._i += 1
        return row


class ColumnIterator(_MatrixView[T]):
    """Iterate over the entries of a single column, top to bottom.

    This does not iterate over all columns. If you want that, transpose the matrix and
    iterate over its rows (it requires the same amount of work).
    """

    def __init__(self, mat: 'Mat2[T]', col: int):
        super().__init__(mat)
        self._col = col
        if not 0 <= col < mat.cols:
            self._exhausted = True

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        self._check_version()
        if self._i >= self._mat.rows:
            self._stop()
        item = self._mat.get(self._i, self._col)
        self._i += 1
        return item
