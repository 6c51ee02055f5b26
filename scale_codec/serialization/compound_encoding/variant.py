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
A variant is one alternative of a tagged union: the 1-byte index followed by the payload of that alternative.

Layout: [index: u8][payload]

The index encoding itself is in `scale_codec.serialization.encoding.variant`, this module pairs it with the payload.
Unit variants simply have an encoder that writes nothing.

>>> from scale_codec.serialization.encoding.int import encode_int, decode_int
>>> from scale_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> encode_i32 = lambda se, v: encode_int(se, v, length=4, signed=True)
>>> decode_i32 = lambda de: decode_int(de, length=4, signed=True)
>>> se = Serializer.build_bytes_serializer()
>>> encode_variant(se, 0, 3, encode_i32, variant_count=2)
>>> encode_variant(se, 1, 'foo', encode_utf8, variant_count=2)
>>> bytes(se.finalize()).hex()
'00030000000c666f6f'

Breakdown of the result:

    00: variant 0
    03000000: 3 as an i32
    01: variant 1
    0c666f6f: 'foo' with length prefix

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010c666f6f'))
>>> decode_variant(de, (decode_i32, decode_utf8))
(1, 'foo')
>>> de.finalize()
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.encoding.variant import decode_variant_index, encode_variant_index

from . import Decoder, Encoder

T = TypeVar('T')
S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


def encode_variant(serializer: S, index: int, value: T, encoder: Encoder[S, T], *, variant_count: int) -> None:
    encode_variant_index(serializer, index, variant_count=variant_count)
    encoder(serializer, value)


def decode_variant(deserializer: D, decoders: Sequence[Decoder[D, Any]]) -> tuple[int, Any]:
    """ Read the index and dispatch to the matching decoder, returns `(index, payload)`.
    """
    index = decode_variant_index(deserializer, variant_count=len(decoders))
    return index, decoders[index](deserializer)
