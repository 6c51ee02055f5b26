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
Encoding a mapping is equivalent to encoding a collection of 2-tuples.

Layout: [N: compact][key_0][value_0]...[key_N][value_N]

Entries are written in the mapping's iteration order, nothing is sorted or deduplicated.

>>> from scale_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from scale_codec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> value = {
...     'foo': False,
...     'bar': True,
...     'foobar': True,
...     'baz': False,
... }
>>> encode_mapping(se, value, encode_utf8, encode_bool)
>>> bytes(se.finalize()).hex()
'100c666f6f000c6261720118666f6f626172010c62617a00'

Breakdown of the result:

    10: 4 as a compact integer, the total length
    0c666f6f: 'foo' with length prefix
    00: False
    0c626172: 'bar' with length prefix
    01: True
    18666f6f626172: 'foobar' with length prefix
    01: True
    0c62617a: 'baz' with length prefix
    00: False

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('100c666f6f000c6261720118666f6f626172010c62617a00'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict)
{'foo': False, 'bar': True, 'foobar': True, 'baz': False}
>>> de.finalize()
"""

from collections.abc import Iterable, Mapping
from typing import Callable, Optional, TypeVar

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.encoding.compact import encode_compact

from . import Decoder, Encoder
from .collection import decode_length

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)
S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


def encode_mapping(
    serializer: S,
    values_mapping: Mapping[KT, VT],
    key_encoder: Encoder[S, KT],
    value_encoder: Encoder[S, VT],
) -> None:
    encode_compact(serializer, len(values_mapping))
    for key, value in values_mapping.items():
        key_encoder(serializer, key)
        value_encoder(serializer, value)


def decode_mapping(
    deserializer: D,
    key_decoder: Decoder[D, KT],
    value_decoder: Decoder[D, VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
    *,
    max_length: Optional[int] = None,
    min_entry_size: int = 1,
) -> R:
    size = decode_length(deserializer, max_length=max_length, min_element_size=min_entry_size)
    return mapping_builder(
        (key_decoder(deserializer), value_decoder(deserializer))
        for _ in range(size)
    )
