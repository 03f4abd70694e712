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
"""Immutable rational numbers in canonical reduced form

Every value passes through :func:`reduce`, so the denominator is always
positive and coprime with the numerator. Zero is represented as (0, 1).
Python integers have arbitrary precision, hence no overflow can occur.
"""

from typing import Optional, Tuple
from exactrational.names import *
from exactrational.errors import InvalidArgument, DivisionByZero


def _is_integer(value) -> bool:
    # bool is an int subclass but not a valid operand
    return isinstance(value, int) and not isinstance(value, bool)


def _check_integer(value, name: str):
    if not _is_integer(value):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers (Euclidean algorithm)

    gcd(a, 0) = a and gcd(a, b) = gcd(b, a mod b) otherwise.

    Args:
        a (int):
            First non-negative integer.

        b (int):
            Second non-negative integer.

    Returns:
        (int):
            The greatest common divisor of a and b. gcd(0, 0) is 0.
    """
    _check_integer(a, 'a')
    _check_integer(b, 'b')
    if a < 0 or b < 0:
        raise InvalidArgument(f"{ERR_NEGATIVE_GCD}, got gcd({a}, {b})")
    while b != 0:
        a, b = b, a % b
    return a


def reduce(numerator: int, denominator: int) -> Tuple[int, int]:
    """Reduce a numerator/denominator pair to canonical form

    Both parts are divided by their greatest common divisor. Afterwards the sign
    is moved to the numerator so that the denominator is positive.

    Example:
        reduce(3, -9) returns (-1, 3)

    Args:
        numerator (int):
            Numerator of the (possibly unreduced) fraction.

        denominator (int):
            Denominator of the (possibly unreduced) fraction. Must not be zero.

    Returns:
        (Tuple[int, int]):
            The canonical pair (numerator, denominator). Zero yields (0, 1).
    """
    _check_integer(numerator, 'numerator')
    _check_integer(denominator, 'denominator')
    if denominator == 0:
        raise InvalidArgument(ERR_ZERO_DENOMINATOR)
    g = gcd(abs(numerator), abs(denominator))
    numerator, denominator = numerator // g, denominator // g
    if denominator < 0:
        return -numerator, -denominator
    return numerator, denominator


class Rational:
    """An exact rational number

    Instances are immutable and always in canonical form. Arithmetic returns new
    instances and never modifies its operands. Plain integers are accepted as
    the other operand and treated as n/1.

    Example:
        half = Rational(1, 2)
        half + Rational(1, 3)    # Rational(5, 6)
        half ** -2               # Rational(4, 1)

    Args:
        numerator (int):
            The numerator.

        denominator (optional (int)): (Default: 1)
            The denominator. A zero denominator raises InvalidArgument.
    """
    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: Optional[int] = None):
        _check_integer(numerator, 'numerator')
        if denominator is None:
            # n/1 is canonical already
            denominator = 1
        else:
            numerator, denominator = reduce(numerator, denominator)
        object.__setattr__(self, '_numerator', numerator)
        object.__setattr__(self, '_denominator', denominator)

    @classmethod
    def _from_canonical(cls, numerator: int, denominator: int) -> 'Rational':
        """Wrap a pair that is known to be canonical without reducing it again"""
        obj = cls.__new__(cls)
        object.__setattr__(obj, '_numerator', numerator)
        object.__setattr__(obj, '_denominator', denominator)
        return obj

    @classmethod
    def _from_unreduced(cls, numerator: int, denominator: int) -> 'Rational':
        return cls._from_canonical(*reduce(numerator, denominator))

    def __setattr__(self, name, value):
        raise AttributeError(f"Rational is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Rational is immutable, cannot delete '{name}'")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_tuple(self) -> Tuple[int, int]:
        """Return the canonical (numerator, denominator) pair"""
        return self._numerator, self._denominator

    # Arithmetic

    def add(self, other) -> 'Rational':
        """Return self + other"""
        n2, d2 = _operand(other)
        return Rational._from_unreduced(self._numerator * d2 + n2 * self._denominator, self._denominator * d2)

    def subtract(self, other) -> 'Rational':
        """Return self - other"""
        n2, d2 = _operand(other)
        return Rational._from_unreduced(self._numerator * d2 - n2 * self._denominator, self._denominator * d2)

    def multiply(self, other) -> 'Rational':
        """Return self * other"""
        n2, d2 = _operand(other)
        return Rational._from_unreduced(self._numerator * n2, self._denominator * d2)

    def divide(self, other) -> 'Rational':
        """Return self / other, raises DivisionByZero if other is zero"""
        n2, d2 = _operand(other)
        if n2 == 0:
            raise DivisionByZero(ERR_DIVISION_BY_ZERO)
        return Rational._from_unreduced(self._numerator * d2, self._denominator * n2)

    def pow(self, exponent: int) -> 'Rational':
        """Raise to an integer power

        A zero exponent yields one for every base, including zero. A negative
        exponent raises the reciprocal, which is undefined for zero.

        Args:
            exponent (int):
                Positive, negative or zero integer exponent.

        Returns:
            (Rational):
                self ** exponent in canonical form.
        """
        _check_integer(exponent, 'exponent')
        if exponent == 0:
            return Rational.ONE
        if exponent > 0:
            return Rational._from_unreduced(self._numerator**exponent, self._denominator**exponent)
        if self._numerator == 0:
            raise DivisionByZero(ERR_DIVISION_BY_ZERO)
        abs_exp = -exponent
        return Rational._from_unreduced(self._denominator**abs_exp, self._numerator**abs_exp)

    def negate(self) -> 'Rational':
        """Return -self"""
        return Rational._from_canonical(-self._numerator, self._denominator)

    def invert(self) -> 'Rational':
        """Return the multiplicative inverse 1/self"""
        return self.pow(-1)

    # Predicates

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_integer(self) -> bool:
        return self._denominator == 1

    # Python operator overloading

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return Rational(other).add(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return Rational(other).subtract(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return Rational(other).multiply(self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return Rational(other).divide(self)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            raise TypeError("pow() with a modulus is not supported for Rational")
        if not _is_integer(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return self._numerator == other._numerator and self._denominator == other._denominator
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Rational, self._numerator, self._denominator))

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __reduce__(self):
        # copy and pickle support, __setattr__ is blocked
        return (Rational, (self._numerator, self._denominator))


def _is_operand(value) -> bool:
    return isinstance(value, Rational) or _is_integer(value)


def _operand(value) -> Tuple[int, int]:
    """Canonical pair of a Rational or int operand"""
    if isinstance(value, Rational):
        return value._numerator, value._denominator
    if _is_integer(value):
        return value, 1
    raise TypeError(f"Unsupported operand type for rational arithmetic: {type(value).__name__}")


def new(numerator: int, denominator: Optional[int] = None) -> Rational:
    """Create a rational number in canonical form

    Example:
        new(4, 8) returns Rational(1, 2)
        new(7) returns Rational(7, 1)

    Args:
        numerator (int):
            The numerator, or the integer value if no denominator is given.

        denominator (optional (int)):
            The denominator. Must not be zero.

    Returns:
        (Rational):
            The reduced rational number.
    """
    return Rational(numerator, denominator)


# Constants
Rational.ZERO = Rational(0)
Rational.ONE = Rational(1)
