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
This module implements encoding of a single Unicode scalar value as its code point in a little-endian u32.

>>> se = Serializer.build_bytes_serializer()
>>> encode_char(se, 'a')  # writes 61000000
>>> encode_char(se, '😎')  # writes 0ef60100
>>> bytes(se.finalize()).hex()
'610000000ef60100'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('610000000ef60100'))
>>> decode_char(de)
'a'
>>> decode_char(de)
'😎'

Surrogates and anything above U+10FFFF are not scalar values:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00d80000'))
>>> try:
...     decode_char(de)
... except InvalidCharacterError as e:
...     print(*e.args)
55296 is not a valid unicode scalar value (at byte 0)
"""

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.encoding.int import decode_int, encode_int
from scale_codec.serialization.exceptions import InvalidCharacterError

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def _is_scalar_value(code_point: int) -> bool:
    return 0 <= code_point <= MAX_CODE_POINT and code_point not in SURROGATES


def encode_char(serializer: Serializer, value: str) -> None:
    if len(value) != 1:
        raise ValueError(f'expected a single character, got {len(value)}')
    code_point = ord(value)
    if not _is_scalar_value(code_point):
        raise ValueError(f'{code_point} is not a valid unicode scalar value')
    encode_int(serializer, code_point, length=4, signed=False)


def decode_char(deserializer: Deserializer) -> str:
    pos = deserializer.cur_pos()
    code_point = decode_int(deserializer, length=4, signed=False)
    if not _is_scalar_value(code_point):
        raise InvalidCharacterError(f'{code_point} is not a valid unicode scalar value', position=pos)
    return chr(code_point)
