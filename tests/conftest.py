import pytest
from fractions import Fraction
from sympy import Rational
from mat2 import Mat2


class GFp:
    """Element of the prime field GF(p). Needs the modulus to be constructed, so the
    zero and one elements cannot be derived from the type alone."""

    def __init__(self, value, p):
        self.p = p
        self.value = value % p

    def __add__(self, other):
        return GFp(self.value + other.value, self.p)

    def __mul__(self, other):
        return GFp(self.value * other.value, self.p)

    def __truediv__(self, other):
        if other.value == 0:
            raise ZeroDivisionError("division by zero in GF(" + str(self.p) + ")")
        return self * GFp(pow(other.value, self.p - 2, self.p), self.p)

    def __neg__(self):
        return GFp(-self.value, self.p)

    def __eq__(self, other):
        if not isinstance(other, GFp):
            return NotImplemented
        return self.p == other.p and self.value == other.value

    def __repr__(self):
        return "GFp(" + str(self.value) + ", " + str(self.p) + ")"


@pytest.fixture
def square():
    """Provide the 3x3 matrix 1..9, row by row."""
    return Mat2.from_list([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture(params=[Fraction, Rational], ids=["fraction", "sympy"], scope="session")
def field(request: pytest.FixtureRequest):
    """Provide session-level fixture for exact element types."""
    return request.param


@pytest.fixture(scope="session")
def gf5():
    """Provide a constructor for elements of GF(5)."""
    return lambda v: GFp(v, 5)
