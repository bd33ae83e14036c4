"""Test construction, shape and comparison of matrices."""
import pytest
from fractions import Fraction
from mat2 import Mat2


def test_cons():
    x = Mat2.new(3, 2)
    assert Mat2.from_list([]) is None
    z = Mat2.new_with(3, 2, lambda i, j: 0)
    assert x == z
    assert Mat2.from_list([[1, 2, 3], [1, 2]]) is None


def test_from_list_rejects_empty_rows():
    assert Mat2.from_list([[]]) is None
    assert Mat2.from_list([[], []]) is None


def test_from_list_accepts_tuples():
    x = Mat2.from_list(((1, 2), (3, 4)))
    assert x.get_row(1) == (3, 4)


def test_from_list_copies_rows():
    src = [[1, 2], [3, 4]]
    x = Mat2.from_list(src)
    src[0][0] = 9
    src.append([5, 6])
    assert x.get(0, 0) == 1
    assert x.rows == 2


def test_new_uses_default_factory():
    x = Mat2.new(2, 2, Fraction)
    assert all(isinstance(v, Fraction) and v == 0 for row in x for v in row)
    y = Mat2.new(1, 3, float)
    assert y.get_row(0) == (0.0, 0.0, 0.0)


def test_new_with_coordinates():
    x = Mat2.new_with(2, 3, lambda i, j: 10 * i + j)
    assert x.get_row(0) == (0, 1, 2)
    assert x.get_row(1) == (10, 11, 12)


def test_negative_counts():
    with pytest.raises(ValueError):
        Mat2.new(-1, 2)
    with pytest.raises(ValueError):
        Mat2.new_with(2, -1, lambda i, j: 0)


def test_zero_rows():
    x = Mat2.new(0, 3)
    assert x.shape == (0, 3)
    assert list(x.row_iter()) == []


def test_get_dimension():
    x = Mat2.from_list([[1, 2], [3, 4]])
    assert x.dimension() == (2, 2)
    y = Mat2.from_list([[1, 2, 3], [4, 5, 6]])
    assert y.dimension() == (3, 2)
    assert y.shape == (2, 3)
    assert len(y) == 2


def test_identity():
    x = Mat2.identity(3)
    assert x == Mat2.from_list([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    y = Mat2.identity(2, Fraction(0), Fraction(1))
    assert all(isinstance(v, Fraction) for row in y for v in row)


def test_copy_is_independent(square):
    c = square.copy()
    assert c == square
    c.scale_row(0, 2)
    assert c != square
    assert square.get_row(0) == (1, 2, 3)


def test_equality():
    x = Mat2.from_list([[1, 2], [3, 4]])
    assert x == Mat2.from_list([[1, 2], [3, 4]])
    assert x != Mat2.from_list([[1, 2], [3, 5]])
    assert x != Mat2.from_list([[1, 2, 0], [3, 4, 0]])
    assert x != [[1, 2], [3, 4]]
    with pytest.raises(TypeError):
        hash(x)


def test_str():
    x = Mat2.from_list([[1, 2], [3, 4]])
    assert str(x) == "[\n1 2\n3 4\n]\n"
    assert repr(x) == "Mat2(rows=2, cols=2, data=[[1, 2], [3, 4]])"


def test_transpose():
    x = Mat2.from_list([[1, 2, 3], [4, 5, 6]])
    t = x.transpose()
    assert t.shape == (3, 2)
    assert t.get_row(0) == (1, 4)
    assert t.get_row(2) == (3, 6)
    assert Mat2.new(0, 2).transpose().shape == (2, 0)
