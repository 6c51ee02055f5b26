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
A fixed-size array is a homogeneous sequence whose length is part of its type, so no length is written.

Layout: [value_0]...[value_N]

>>> from scale_codec.serialization.encoding.int import encode_int, decode_int
>>> encode_u16 = lambda se, v: encode_int(se, v, length=2, signed=False)
>>> decode_u16 = lambda de: decode_int(de, length=2, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1, 2, 3], encode_u16, length=3)
>>> bytes(se.finalize()).hex()
'010002000300'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010002000300'))
>>> decode_array(de, decode_u16, tuple, length=3)
(1, 2, 3)
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_array(se, [1, 2], encode_u16, length=3)
... except ValueError as e:
...     print(*e.args)
expected 3 elements, got 2
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from scale_codec.serialization import Deserializer, Serializer

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)
S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


def encode_array(serializer: S, values: Collection[T], encoder: Encoder[S, T], *, length: int) -> None:
    if len(values) != length:
        raise ValueError(f'expected {length} elements, got {len(values)}')
    for value in values:
        encoder(serializer, value)


def decode_array(deserializer: D, decoder: Decoder[D, T], builder: Callable[[Iterable[T]], R], *, length: int) -> R:
    return builder(decoder(deserializer) for _ in range(length))
