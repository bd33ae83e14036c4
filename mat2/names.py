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
"""Static strings and defaults used in the mat2 package

    Element identities

        ZERO = 'zero'

        ONE = 'one'

    Rational conversion

        MAX_PRECISION = 'max_precision'

        MAX_DENOM = 'max_denom'

        RATIONAL = 'rational'
"""

# Element identities
ZERO = 'zero'
ONE = 'one'

# Rational conversion
MAX_PRECISION = 'max_precision'
MAX_DENOM = 'max_denom'
RATIONAL = 'rational'

DEFAULT_MAX_PRECISION = 6
DEFAULT_MAX_DENOM = 100

# Option keys accepted by the elimination routines and by the conversion constructors
IDENTITY_KEYS = {ZERO, ONE}
FRACTION_KEYS = {MAX_PRECISION, MAX_DENOM}
CONVERSION_KEYS = FRACTION_KEYS | {RATIONAL}
