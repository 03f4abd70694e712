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
"""Exact conversion between Rational and other rational number types

Supported are Python's fractions.Fraction, sympy.Rational (including
sympy.Integer) and numpy arrays holding any of these. Conversions are
lossless. Floating point input is rejected instead of being approximated.
"""

import logging
from fractions import Fraction
from typing import Union
import numpy as np
from sympy import Rational as SympyRational
from exactrational.rational import Rational

__all__ = [
    'to_fraction',
    'from_fraction',
    'to_sympy',
    'from_sympy',
    'as_rational',
    'array_to_rationals',
    'rationals_to_fractions',
    'rationals_to_sympy',
]

# Types that as_rational converts exactly
Exact = Union[Rational, int, Fraction, SympyRational]


def to_fraction(value: Rational) -> Fraction:
    """Convert a Rational to fractions.Fraction"""
    if not isinstance(value, Rational):
        raise TypeError(f"Expected Rational, got {type(value).__name__}")
    return Fraction(value.numerator, value.denominator)


def from_fraction(value: Fraction) -> Rational:
    """Convert a fractions.Fraction to Rational"""
    if not isinstance(value, Fraction):
        raise TypeError(f"Expected fractions.Fraction, got {type(value).__name__}")
    return Rational(value.numerator, value.denominator)


def to_sympy(value: Rational) -> SympyRational:
    """Convert a Rational to sympy.Rational"""
    if not isinstance(value, Rational):
        raise TypeError(f"Expected Rational, got {type(value).__name__}")
    return SympyRational(value.numerator, value.denominator)


def from_sympy(value: SympyRational) -> Rational:
    """Convert a sympy.Rational (or sympy.Integer) to Rational

    Args:
        value (sympy.Rational):
            A rational sympy number. Floats, symbols and irrational numbers
            raise a TypeError.

    Returns:
        (Rational):
            The same value in canonical form.
    """
    if not isinstance(value, SympyRational):
        raise TypeError(f"Expected sympy.Rational, got {type(value).__name__}")
    return Rational(int(value.p), int(value.q))


def as_rational(value: Exact) -> Rational:
    """Convert an exact number to Rational

    Args:
        value (Rational, int, fractions.Fraction or sympy.Rational):
            The number to convert. numpy integer scalars are accepted as well.

    Returns:
        (Rational):
            The value as Rational.
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, bool):
        raise TypeError("Cannot convert bool to Rational")
    if isinstance(value, (int, np.integer)):
        return Rational(int(value))
    if isinstance(value, Fraction):
        return from_fraction(value)
    if isinstance(value, SympyRational):
        return from_sympy(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to Rational exactly")


def array_to_rationals(arr) -> np.ndarray:
    """
    Convert a numpy array (or nested list) of exact numbers to Rationals.

    Args:
        arr (numpy.ndarray or list):
            Integer array or object array of ints, Fractions, sympy Rationals
            or Rationals.

    Returns:
        (numpy.ndarray):
            Object array of the same shape containing Rational objects.
    """
    arr = np.asarray(arr)
    # empty input defaults to float64
    if arr.dtype.kind == 'f' and arr.size:
        raise TypeError("Cannot convert floating point array to Rationals exactly")
    result = np.empty(arr.shape, dtype=object)
    flat_result = result.flat
    for i, val in enumerate(arr.flat):
        flat_result[i] = as_rational(val)
    logging.debug(f"Converted array of shape {arr.shape} to Rationals.")
    return result


def rationals_to_fractions(arr) -> np.ndarray:
    """Convert an array of Rationals to an object array of fractions.Fraction"""
    arr = np.asarray(arr, dtype=object)
    result = np.empty(arr.shape, dtype=object)
    flat_result = result.flat
    for i, val in enumerate(arr.flat):
        flat_result[i] = to_fraction(as_rational(val))
    logging.debug(f"Converted array of shape {arr.shape} to Fractions.")
    return result


def rationals_to_sympy(arr) -> np.ndarray:
    """Convert an array of Rationals to an object array of sympy Rationals"""
    arr = np.asarray(arr, dtype=object)
    result = np.empty(arr.shape, dtype=object)
    flat_result = result.flat
    for i, val in enumerate(arr.flat):
        flat_result[i] = to_sympy(as_rational(val))
    logging.debug(f"Converted array of shape {arr.shape} to sympy Rationals.")
    return result
