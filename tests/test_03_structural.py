"""Test row and column insertion, row replacement and augmentation."""
import pytest
from mat2 import Mat2


def assert_rectangular(x):
    data = x.to_list()
    assert len(data) == x.rows
    assert all(len(row) == x.cols for row in data)


def test_swap_rows(square):
    square.swap_rows(0, 1)
    assert square.get_row(0) == (4, 5, 6)
    assert square.get_row(1) == (1, 2, 3)
    assert square.get_row(2) == (7, 8, 9)
    square.swap_rows(2, 2)
    assert square.get_row(2) == (7, 8, 9)


def test_swap_rows_out_of_bounds(square):
    before = square.copy()
    with pytest.raises(IndexError):
        square.swap_rows(0, 3)
    with pytest.raises(IndexError):
        square.swap_rows(3, 0)
    assert square == before


def test_set_row(square):
    new_row = [0, 0, 1]
    square.set_row(1, new_row)
    new_row[0] = 5
    assert square.get_row(1) == (0, 0, 1)
    assert_rectangular(square)


def test_set_row_rejects_bad_arguments(square):
    before = square.copy()
    with pytest.raises(IndexError):
        square.set_row(3, [1, 2, 3])
    with pytest.raises(ValueError):
        square.set_row(0, [1, 2])
    with pytest.raises(ValueError):
        square.set_row(0, [1, 2, 3, 4])
    assert square == before


def test_append_column(square):
    assert square.get_row(0) == (1, 2, 3)
    assert square.append_column([0, 0, 0])
    assert square.get_row(0) == (1, 2, 3, 0)
    assert square.cols == 4

    # non-square
    x = Mat2.from_list([[1, 2, 3, 0], [4, 5, 6, 0], [7, 8, 9, 0]])
    assert x.append_column([0, 0, 0])
    assert not x.append_column([0])
    assert x.get_row(0) == (1, 2, 3, 0, 0)
    assert_rectangular(x)

    x = Mat2.from_list([[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]])
    assert x.append_column([0, 0, 0, 0])
    assert not x.append_column([0])
    assert x.get_row(0) == (1, 2, 3, 0)
    assert x.get_column(3) == (0, 0, 0, 0)
    assert_rectangular(x)


def test_append_column_mismatch_leaves_matrix_unchanged(square):
    before = square.copy()
    assert not square.append_column([1, 2])
    assert not square.append_column([1, 2, 3, 4])
    assert square == before
    assert square.dimension() == (3, 3)


def test_append_row(square):
    assert square.get_row_opt(3) is None
    assert square.append_row([10, 11, 12])
    assert not square.append_row([0])
    assert square.get_row(3) == (10, 11, 12)
    assert square.rows == 4

    # non-square
    x = Mat2.from_list([[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]])
    assert x.get_row_opt(4) is None
    assert x.append_row([10, 11, 12])
    assert not x.append_row([0])
    assert x.get_row(4) == (10, 11, 12)

    x = Mat2.from_list([[1, 2, 3, 0], [4, 5, 6, 0], [7, 8, 9, 0]])
    assert x.append_row([10, 11, 12, 13])
    assert not x.append_row([0])
    assert x.get_row(3) == (10, 11, 12, 13)
    assert_rectangular(x)


def test_append_row_mismatch_leaves_matrix_unchanged(square):
    before = square.copy()
    assert not square.append_row([1, 2])
    assert not square.append_row([1, 2, 3, 4])
    assert square == before


def test_append_row_copies_values(square):
    row = [10, 11, 12]
    square.append_row(row)
    row[0] = 0
    assert square.get(3, 0) == 10


def test_augment(square):
    y = Mat2.from_list([[4, 5, 6, 7], [7, 8, 9, 10], [10, 11, 12, 13]])
    z = Mat2.from_list([[1, 2]])

    assert square.augment(y)
    assert not square.augment(z)

    it = square.row_iter()
    assert next(it) == (1, 2, 3, 4, 5, 6, 7)
    assert next(it) == (4, 5, 6, 7, 8, 9, 10)
    assert next(it) == (7, 8, 9, 10, 11, 12, 13)
    with pytest.raises(StopIteration):
        next(it)
    assert square.dimension() == (7, 3)
    assert_rectangular(square)


def test_augment_consumes_other(square):
    y = Mat2.from_list([[0], [0], [1]])
    assert square.augment(y)
    assert y.shape == (0, 0)
    assert list(y.row_iter()) == []
    assert square.get_column(3) == (0, 0, 1)


def test_augment_mismatch_leaves_both_unchanged(square):
    before = square.copy()
    z = Mat2.from_list([[1, 2], [3, 4]])
    assert not square.augment(z)
    assert square == before
    assert z == Mat2.from_list([[1, 2], [3, 4]])
    assert not square.augment(square)
    assert square == before
