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
Element capabilities for generic matrix entries.

A Mat2 does not fix the type of its entries. Each matrix operation only needs a
few capabilities of the element type, which are spelled out here as protocols:
plain access needs nothing, row scaling needs multiplication, Gauss-Jordan
reduction needs the field operations plus identities, and so on.

The module also provides the conversion helpers used to bring floats, numpy
scalars and sympy numbers into exact fractions.Fraction arithmetic.
"""

from fractions import Fraction
from typing import Any, Protocol, Tuple, Union
import numpy as np
from sympy import Basic, Rational, S

from .names import ZERO, ONE, IDENTITY_KEYS, FRACTION_KEYS, DEFAULT_MAX_PRECISION, DEFAULT_MAX_DENOM

# Type alias for numeric types that can be converted to Fraction
Numeric = Union[int, float, Fraction, Rational, np.integer, np.floating]


class SupportsMul(Protocol):

    def __mul__(self, other: Any) -> Any:
        ...


class SupportsDiv(Protocol):

    def __truediv__(self, other: Any) -> Any:
        ...


class SupportsNeg(Protocol):

    def __neg__(self) -> Any:
        ...


class ElementMath:
    """Utility class for element identities and rational conversion."""

    @staticmethod
    def zero_of(sample: Any) -> Any:
        """
        Additive identity of the type of sample.

        sympy numbers map to S.Zero, everything else is constructed as type(sample)(0).

        Raises:
            TypeError: If the type cannot be constructed from 0
        """
        if isinstance(sample, Basic):
            return S.Zero
        try:
            return type(sample)(0)
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot derive a zero element for {type(sample).__name__}, "
                            f"pass it explicitly with {ZERO}=...") from e

    @staticmethod
    def one_of(sample: Any) -> Any:
        """
        Multiplicative identity of the type of sample.

        Raises:
            TypeError: If the type cannot be constructed from 1
        """
        if isinstance(sample, Basic):
            return S.One
        try:
            return type(sample)(1)
        except (TypeError, ValueError) as e:
            raise TypeError(f"Cannot derive a one element for {type(sample).__name__}, "
                            f"pass it explicitly with {ONE}=...") from e

    @staticmethod
    def identities(sample: Any, **kwargs) -> Tuple[Any, Any]:
        """
        Resolve the (zero, one) pair for an elimination routine.

        Explicit 'zero' and 'one' keyword options take precedence. Missing ones are
        derived from sample, usually the first entry of the matrix.

        Raises:
            ValueError: If an unknown option key is passed
        """
        for key in kwargs:
            if key not in IDENTITY_KEYS:
                raise ValueError("Key " + key + " is not supported.")
        zero = kwargs[ZERO] if ZERO in kwargs else ElementMath.zero_of(sample)
        one = kwargs[ONE] if ONE in kwargs else ElementMath.one_of(sample)
        return zero, one

    @staticmethod
    def to_fraction(value: Numeric,
                    max_precision: int = DEFAULT_MAX_PRECISION,
                    max_denom: int = DEFAULT_MAX_DENOM) -> Fraction:
        """
        Convert a numeric value to a Fraction.

        Args:
            value: An int, float, Fraction, sympy.Rational or numpy scalar
            max_precision: Decimal places kept for floats that have no small denominator
            max_denom: Largest denominator tried first for floats

        Returns:
            Fraction representation of the value

        Raises:
            TypeError: For values that have no rational representation
        """
        if isinstance(value, Fraction):
            return value
        elif isinstance(value, Rational):
            return Fraction(int(value.p), int(value.q))
        elif isinstance(value, (bool, np.bool_)):
            raise TypeError(f"Cannot convert {type(value)} to Fraction")
        elif isinstance(value, (int, np.integer)):
            return Fraction(int(value))
        elif isinstance(value, (float, np.floating)):
            return float_to_rational(float(value), max_precision, max_denom)
        else:
            raise TypeError(f"Cannot convert {type(value)} to Fraction")


def float_to_rational(val: float,
                      max_precision: int = DEFAULT_MAX_PRECISION,
                      max_denom: int = DEFAULT_MAX_DENOM) -> Fraction:
    """
    Convert a finite float to a Fraction with a small denominator where possible.

    Integral values are returned exactly. Otherwise the closest fraction with a
    denominator up to max_denom is used if it agrees with val to max_precision
    decimal places, so that 0.1 becomes 1/10 rather than 3602879701896397/36028797018963968.
    Values with no such fraction are rounded to max_precision decimal places.

    Raises:
        ValueError: For NaN and infinite values, which have no rational representation
    """
    if not np.isfinite(val):
        raise ValueError(f"Cannot convert {val} to Fraction")
    val = float(val)
    if val.is_integer():
        return Fraction(int(val))

    candidate = Fraction(val).limit_denominator(max_denom)
    if round(float(candidate), max_precision) == round(val, max_precision):
        return candidate
    return Fraction(round(val * 10**max_precision), 10**max_precision)


def to_fraction(value: Numeric, **kwargs) -> Fraction:
    """
    Module-level shortcut for ElementMath.to_fraction.

    Accepts the keyword options max_precision and max_denom.
    """
    for key in kwargs:
        if key not in FRACTION_KEYS:
            raise ValueError("Key " + key + " is not supported.")
    return ElementMath.to_fraction(value, **kwargs)
