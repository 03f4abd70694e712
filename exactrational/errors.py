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
"""Exceptions raised by rational arithmetic

Both error kinds are precondition violations. They are raised at the point of
detection and are never recovered internally.
"""


class RationalError(ArithmeticError):
    """Base class of all errors raised by exactrational"""


class InvalidArgument(RationalError, ValueError):
    """An argument violates a precondition, e.g. a zero denominator"""


class DivisionByZero(RationalError, ZeroDivisionError):
    """Division by the rational value zero"""
