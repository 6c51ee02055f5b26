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
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements encoding of the first case, the second case can be encoded using the collection encoder.

There is no length prefix, the encoding of `tuple[A, B, C]` is just the encoding of A concatenated with B concatenated
with C. Records (dataclasses, named tuples) are encoded the same way, with their fields in declared order.

>>> from scale_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from scale_codec.serialization.encoding.bool import encode_bool, decode_bool
>>> from scale_codec.serialization.encoding.bytes import decode_bytes, encode_bytes
>>> se = Serializer.build_bytes_serializer()
>>> values = ('foobar', False, b'test')
>>> encode_tuple(se, values, (encode_utf8, encode_bool, encode_bytes))
>>> bytes(se.finalize()).hex()
'18666f6f626172001074657374'

Breakdown of the result:

    18666f6f626172: 'foobar'
    00: False
    1074657374: b'test'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('18666f6f626172001074657374'))
>>> decode_tuple(de, (decode_utf8, decode_bool, decode_bytes))
('foobar', False, b'test')
>>> de.finalize()
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from scale_codec.serialization import Deserializer, Serializer

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(serializer: Serializer, values: tuple[Unpack[Ts]], encoders: tuple[Encoder[Any, Any], ...]) -> None:
    if len(values) != len(encoders):
        raise ValueError(f'expected {len(encoders)} elements, got {len(values)}')
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any, Any], ...]) -> tuple[Unpack[Ts]]:
    return tuple(decoder(deserializer) for decoder in decoders)  # type: ignore[return-value]
