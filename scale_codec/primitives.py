# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
Annotations for the SCALE types that have no direct Python counterpart.

SCALE integers always have a declared width, so a plain `int` annotation is not accepted, one of these must be used
instead. At runtime they are plain `int`, `str` and `bytes` values.
"""

from typing import NewType

# Fixed-width integers, encoded in little-endian two's complement.
U8 = NewType('U8', int)
U16 = NewType('U16', int)
U32 = NewType('U32', int)
U64 = NewType('U64', int)
U128 = NewType('U128', int)
I8 = NewType('I8', int)
I16 = NewType('I16', int)
I32 = NewType('I32', int)
I64 = NewType('I64', int)
I128 = NewType('I128', int)

# Unsigned integer in the variable-length compact encoding.
Compact = NewType('Compact', int)

# A single Unicode scalar value, encoded as its code point in a u32.
Char = NewType('Char', str)

# Fixed-size byte arrays, encoded without a length prefix.
H160 = NewType('H160', bytes)
H256 = NewType('H256', bytes)
H512 = NewType('H512', bytes)
