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
"""Stateless operations on rational numbers

RationalOperations bundles construction and arithmetic of Rational values
behind a single provider object. The module-level functions add, subtract,
multiply, divide and pow are bound to the shared INSTANCE, so that

    from exactrational import new, add
    add(new(1, 2), new(1, 3))    # Rational(5, 6)

works without touching the class.
"""

import logging
from typing import List, Optional
from exactrational.names import *
from exactrational.rational import Rational, gcd, _operand

__all__ = [
    'RationalOperations',
    'INSTANCE',
    'add',
    'subtract',
    'multiply',
    'divide',
    'pow',
    'negate',
    'invert',
    'apply',
    'reduce_vector',
]


class RationalOperations:
    """Factory and arithmetic provider for Rational values (singleton)"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(RationalOperations, cls).__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> 'RationalOperations':
        """Returns the singleton instance"""
        return cls()

    def number_class(self) -> type:
        return Rational

    # Factory methods
    def new(self, numerator: int, denominator: Optional[int] = None) -> Rational:
        return Rational(numerator, denominator)

    def zero(self) -> Rational:
        return Rational.ZERO

    def one(self) -> Rational:
        return Rational.ONE

    # Arithmetic operations, delegate to Rational methods
    def add(self, num_a: Rational, num_b: Rational) -> Rational:
        return _as_rational(num_a).add(num_b)

    def subtract(self, num_a: Rational, num_b: Rational) -> Rational:
        return _as_rational(num_a).subtract(num_b)

    def multiply(self, num_a: Rational, num_b: Rational) -> Rational:
        return _as_rational(num_a).multiply(num_b)

    def divide(self, num_a: Rational, num_b: Rational) -> Rational:
        return _as_rational(num_a).divide(num_b)

    def pow(self, number: Rational, exponent: int) -> Rational:
        return _as_rational(number).pow(exponent)

    def negate(self, number: Rational) -> Rational:
        return _as_rational(number).negate()

    def invert(self, number: Rational) -> Rational:
        return _as_rational(number).invert()

    # Predicates
    def is_zero(self, number: Rational) -> bool:
        return _as_rational(number).is_zero()

    def is_one(self, number: Rational) -> bool:
        return _as_rational(number).is_one()

    def is_integer(self, number: Rational) -> bool:
        return _as_rational(number).is_integer()

    def apply(self, operation: str, num_a: Rational, num_b) -> Rational:
        """Apply an operation given by name

        Example:
            apply('multiply', new(2, 3), new(3, 4)) returns Rational(1, 2)

        Args:
            operation (str):
                One of 'add', 'subtract', 'multiply', 'divide' or 'pow'. For 'pow'
                the second argument is the integer exponent.

            num_a (Rational):
                First operand.

            num_b (Rational or int):
                Second operand or exponent.

        Returns:
            (Rational):
                The result of the operation.
        """
        if operation == POW:
            return self.pow(num_a, num_b)
        if operation not in BINARY_OPERATIONS:
            raise ValueError(f"Unknown operation '{operation}'. Supported: {', '.join(BINARY_OPERATIONS + (POW,))}")
        return getattr(self, operation)(num_a, num_b)

    def reduce_vector(self, *vector: Rational) -> List[Rational]:
        """Divide a vector of rationals by their common divisor

        The common divisor of a/b, c/d, ... is gcd(a, c, ...) / lcm(b, d, ...).
        Dividing by it yields coprime integer entries with unchanged signs.
        The entries are returned unchanged (as new list) if the divisor is
        zero or one.

        Example:
            reduce_vector(new(2, 3), new(4, 9)) returns [Rational(3, 1), Rational(2, 1)]

        Args:
            vector (Rational):
                Variable number of Rational (or int) entries.

        Returns:
            (List[Rational]):
                The reduced vector.
        """
        vector = [_as_rational(v) for v in vector]
        if not vector:
            return vector
        gcd_num = 0
        lcm_den = 1
        for v in vector:
            gcd_num = gcd(gcd_num, abs(v.numerator))
            lcm_den = lcm_den * v.denominator // gcd(lcm_den, v.denominator)
        divisor = Rational(gcd_num, lcm_den)
        if divisor.is_zero() or divisor.is_one():
            logging.debug(f"Vector of length {len(vector)} is already reduced.")
            return vector
        logging.debug(f"Reducing vector of length {len(vector)} by common divisor {divisor}.")
        return [v.divide(divisor) for v in vector]


def _as_rational(value) -> Rational:
    if isinstance(value, Rational):
        return value
    return Rational(*_operand(value))


INSTANCE = RationalOperations.instance()

add = INSTANCE.add
subtract = INSTANCE.subtract
multiply = INSTANCE.multiply
divide = INSTANCE.divide
pow = INSTANCE.pow
negate = INSTANCE.negate
invert = INSTANCE.invert
apply = INSTANCE.apply
reduce_vector = INSTANCE.reduce_vector
