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


r"""
This module implements the SCALE "compact" encoding for unsigned integers.

The two least significant bits of the first byte select one of four modes:

- `0b00`: single-byte mode, values in [0, 2**6), the byte is `value << 2`
- `0b01`: two-byte mode, values in [2**6, 2**14), little-endian `value << 2 | 0b01`
- `0b10`: four-byte mode, values in [2**14, 2**30), little-endian `value << 2 | 0b10`
- `0b11`: big-integer mode, values in [2**30, 2**536), the upper 6 bits of the first byte hold `n - 4` where `n` is
  the number of little-endian bytes that follow, `n` is always the minimum that fits the value

>>> se = Serializer.build_bytes_serializer()
>>> encode_compact(se, 0)  # writes 00
>>> encode_compact(se, 63)  # writes fc
>>> encode_compact(se, 64)  # writes 0101
>>> encode_compact(se, 16383)  # writes fdff
>>> encode_compact(se, 16384)  # writes 02000100
>>> encode_compact(se, 2**30 - 1)  # writes feffffff
>>> encode_compact(se, 2**30)  # writes 0300000040
>>> bytes(se.finalize()).hex()
'00fc0101fdff02000100feffffff0300000040'

>>> data = bytes.fromhex('00fc0101fdff02000100feffffff0300000040') + b'test'
>>> de = Deserializer.build_bytes_deserializer(data)
>>> [decode_compact(de) for _ in range(7)]
[0, 63, 64, 16383, 16384, 1073741823, 1073741824]
>>> bytes(de.read_all())
b'test'

Only canonical encodings are accepted, a value that would fit a smaller mode is rejected:

>>> de = Deserializer.build_bytes_deserializer(b'\x01\x00')
>>> try:
...     decode_compact(de)
... except InvalidCompactIntError as e:
...     print(*e.args)
non-canonical compact integer: 0 fits in a shorter mode (at byte 0)

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0700000040'))
>>> try:
...     decode_compact(de)
... except InvalidCompactIntError as e:
...     print(*e.args)
compact integer declares 5 bytes but only 4 are left (at byte 0)
"""

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.exceptions import InvalidCompactIntError

MAX_SINGLE_BYTE_VALUE = 2**6 - 1
MAX_TWO_BYTE_VALUE = 2**14 - 1
MAX_FOUR_BYTE_VALUE = 2**30 - 1
BIG_INT_MIN_BYTES = 4
BIG_INT_MAX_BYTES = 0b111111 + BIG_INT_MIN_BYTES  # 67 bytes -> 536 bits
MAX_COMPACT_VALUE = 2**(8 * BIG_INT_MAX_BYTES) - 1

MODE_MASK = 0b11
SINGLE_BYTE_MODE = 0b00
TWO_BYTE_MODE = 0b01
FOUR_BYTE_MODE = 0b10
BIG_INT_MODE = 0b11


def compact_size(value: int) -> int:
    """ Number of bytes `encode_compact` writes for the given value.

    >>> [compact_size(v) for v in (0, 63, 64, 2**14, 2**30, 2**32, 2**64 - 1)]
    [1, 1, 2, 4, 5, 6, 9]
    """
    if value < 0:
        raise ValueError('cannot encode value <0 as compact')
    if value <= MAX_SINGLE_BYTE_VALUE:
        return 1
    elif value <= MAX_TWO_BYTE_VALUE:
        return 2
    elif value <= MAX_FOUR_BYTE_VALUE:
        return 4
    else:
        return 1 + _big_int_length(value)


def _big_int_length(value: int) -> int:
    length = max((value.bit_length() + 7) // 8, BIG_INT_MIN_BYTES)
    if length > BIG_INT_MAX_BYTES:
        raise ValueError(f'too big to encode as compact, max possible value is 2**536 - 1, got: {value}')
    return length


def encode_compact(serializer: Serializer, value: int) -> None:
    """ Encodes a non-negative integer using the fewest bytes among the four compact modes.

    This module's docstring has more details and examples.
    """
    if value < 0:
        raise ValueError('cannot encode value <0 as compact')
    if value <= MAX_SINGLE_BYTE_VALUE:
        serializer.write_byte(value << 2 | SINGLE_BYTE_MODE)
    elif value <= MAX_TWO_BYTE_VALUE:
        serializer.write_bytes((value << 2 | TWO_BYTE_MODE).to_bytes(2, 'little'))
    elif value <= MAX_FOUR_BYTE_VALUE:
        serializer.write_bytes((value << 2 | FOUR_BYTE_MODE).to_bytes(4, 'little'))
    else:
        length = _big_int_length(value)
        serializer.write_byte((length - BIG_INT_MIN_BYTES) << 2 | BIG_INT_MODE)
        serializer.write_bytes(value.to_bytes(length, 'little'))


def decode_compact(deserializer: Deserializer) -> int:
    """ Decodes a compact integer, rejecting any encoding that is not the canonical one.

    This module's docstring has more details and examples.
    """
    pos = deserializer.cur_pos()
    head = deserializer.read_byte()
    mode = head & MODE_MASK
    if mode == SINGLE_BYTE_MODE:
        return head >> 2
    elif mode == TWO_BYTE_MODE:
        tail = bytes(deserializer.read_bytes(1))
        value = int.from_bytes(bytes([head]) + tail, 'little') >> 2
        lower_bound = MAX_SINGLE_BYTE_VALUE
    elif mode == FOUR_BYTE_MODE:
        tail = bytes(deserializer.read_bytes(3))
        value = int.from_bytes(bytes([head]) + tail, 'little') >> 2
        lower_bound = MAX_TWO_BYTE_VALUE
    else:
        length = (head >> 2) + BIG_INT_MIN_BYTES
        left = deserializer.remaining()
        if length > left:
            raise InvalidCompactIntError(f'compact integer declares {length} bytes but only {left} are left',
                                         position=pos)
        data = bytes(deserializer.read_bytes(length))
        if data[-1] == 0:
            raise InvalidCompactIntError('non-canonical compact integer: most significant byte is zero',
                                         position=pos)
        value = int.from_bytes(data, 'little')
        lower_bound = MAX_FOUR_BYTE_VALUE
    if value <= lower_bound:
        raise InvalidCompactIntError(f'non-canonical compact integer: {value} fits in a shorter mode', position=pos)
    return value
