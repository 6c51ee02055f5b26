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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format is plain little-endian, signed values are written in two's complement.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True)  # writes 00
>>> encode_int(se, 255, length=1, signed=False)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True)  # writes d204
>>> encode_int(se, -1234, length=2, signed=True)  # writes 2efb
>>> encode_int(se, 2**64 - 1, length=8, signed=False)  # writes ffffffffffffffff
>>> bytes(se.finalize()).hex()
'00ffd2042efbffffffffffffffff'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ffd2042efbffffffffffffffff'))
>>> decode_int(de, length=1, signed=True)  # reads 00
0
>>> decode_int(de, length=1, signed=False)  # reads ff
255
>>> decode_int(de, length=2, signed=True)  # reads d204
1234
>>> decode_int(de, length=2, signed=True)  # reads 2efb
-1234
>>> decode_int(de, length=8, signed=False)  # reads ffffffffffffffff
18446744073709551615

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False)
... except ValueError as e:
...     print(*e.args)
too big to encode
"""

from scale_codec.serialization import Deserializer, Serializer

INT_BIT_WIDTHS = (8, 16, 32, 64, 128)


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='little', signed=signed)
    except OverflowError:
        raise ValueError('too big to encode')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='little', signed=signed)
