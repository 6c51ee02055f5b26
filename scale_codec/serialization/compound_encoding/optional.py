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
An optional type is encoded the same way as a collection with max length of 1, except the tag is a single byte.

Layout:

    [0x00] when None
    [0x01][value] when not None

>>> from scale_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, 'foobar', encode_utf8)
>>> bytes(se.finalize()).hex()
'0118666f6f626172'

>>> se = Serializer.build_bytes_serializer()
>>> encode_optional(se, None, encode_utf8)
>>> bytes(se.finalize()).hex()
'00'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0118666f6f626172'))
>>> decode_optional(de, decode_utf8)
'foobar'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00'))
>>> str(decode_optional(de, decode_utf8))
'None'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x02')
>>> try:
...     decode_optional(de, decode_utf8)
... except InvalidOptionError as e:
...     print(*e.args)
b'\x02' is not a valid option tag (at byte 0)

The special case of `Option<bool>` does not use this encoder, see `scale_codec.serialization.encoding.option_bool`.
"""

from typing import Optional, TypeVar

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.exceptions import InvalidOptionError

from . import Decoder, Encoder

T = TypeVar('T')
S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)

NONE_TAG = 0x00
SOME_TAG = 0x01


def encode_optional(serializer: S, value: Optional[T], encoder: Encoder[S, T]) -> None:
    if value is None:
        serializer.write_byte(NONE_TAG)
    else:
        serializer.write_byte(SOME_TAG)
        encoder(serializer, value)


def decode_optional(deserializer: D, decoder: Decoder[D, T]) -> Optional[T]:
    pos = deserializer.cur_pos()
    tag = deserializer.read_byte()
    if tag == SOME_TAG:
        return decoder(deserializer)
    elif tag == NONE_TAG:
        return None
    else:
        raw = bytes([tag])
        raise InvalidOptionError(f'{raw!r} is not a valid option tag', position=pos)
