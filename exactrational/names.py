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
"""Static strings used in the exactrational package

    Operations

        ADD = 'add'

        SUBTRACT = 'subtract'

        MULTIPLY = 'multiply'

        DIVIDE = 'divide'

        POW = 'pow'

        BINARY_OPERATIONS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)

    Error messages

        ERR_ZERO_DENOMINATOR = 'denominator cannot be zero'

        ERR_DIVISION_BY_ZERO = 'division by zero'

        ERR_NEGATIVE_GCD = 'gcd is only defined for non-negative integers'
"""
# Operations
ADD = 'add'
SUBTRACT = 'subtract'
MULTIPLY = 'multiply'
DIVIDE = 'divide'
POW = 'pow'
BINARY_OPERATIONS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)

# Error messages
ERR_ZERO_DENOMINATOR = 'denominator cannot be zero'
ERR_DIVISION_BY_ZERO = 'division by zero'
ERR_NEGATIVE_GCD = 'gcd is only defined for non-negative integers'
