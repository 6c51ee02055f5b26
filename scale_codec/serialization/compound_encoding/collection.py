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
A collection is basically any value that has a known size and is iterable.

Layout: [N: compact][value_0]...[value_N]

>>> from scale_codec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['foobar', 'π', '😎', 'test']
>>> encode_collection(se, value, encode_utf8)
>>> bytes(se.finalize()).hex()
'1018666f6f62617208cf8010f09f988e1074657374'

Breakdown of the result:

    10: 4 as a compact integer, the total length
    18666f6f626172: 'foobar' (with length prefix)
    08cf80: 'π' (with length prefix)
    10f09f988e: '😎' (with length prefix)
    1074657374: 'test' (with length prefix)

When decoding, the builder can be any compabile collection, in the previous example a `list` was encoded, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('1018666f6f62617208cf8010f09f988e1074657374'))
>>> decode_collection(de, decode_utf8, tuple)
('foobar', 'π', '😎', 'test')
>>> de.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, Optional, TypeVar

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.encoding.compact import decode_compact, encode_compact
from scale_codec.serialization.exceptions import CollectionTooLargeError, UnexpectedEndError

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)
S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)

# Elements that take no bytes cannot be checked against the input left, their count is capped at this instead.
ZERO_SIZE_MAX_LENGTH: int = 2**16


def encode_collection(serializer: S, values: Collection[T], encoder: Encoder[S, T]) -> None:
    encode_compact(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_length(
    deserializer: Deserializer,
    *,
    max_length: Optional[int] = None,
    min_element_size: int = 1,
) -> int:
    """ Read a compact length prefix, optionally refusing anything above `max_length`.

    Every element takes at least `min_element_size` bytes, so a length that cannot fit in the remaining input is
    rejected with `UnexpectedEndError` before any element is read.

    >>> decode_length(Deserializer.build_bytes_deserializer(bytes.fromhex('0c010203')))
    3
    >>> try:
    ...     decode_length(Deserializer.build_bytes_deserializer(bytes.fromhex('100102')))
    ... except UnexpectedEndError as e:
    ...     print(*e.args)
    length 4 needs at least 4 bytes, only 2 left (at byte 0)
    """
    pos = deserializer.cur_pos()
    length = decode_compact(deserializer)
    if max_length is not None and length > max_length:
        raise CollectionTooLargeError(f'length {length} is above the maximum of {max_length}', position=pos)
    if min_element_size == 0:
        if max_length is None and length > ZERO_SIZE_MAX_LENGTH:
            raise CollectionTooLargeError(
                f'length {length} of empty elements is above the maximum of {ZERO_SIZE_MAX_LENGTH}',
                position=pos,
            )
    elif length * min_element_size > deserializer.remaining():
        raise UnexpectedEndError(
            f'length {length} needs at least {length * min_element_size} bytes, only {deserializer.remaining()} left',
            position=pos,
        )
    return length


def decode_collection(
    deserializer: D,
    decoder: Decoder[D, T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: Optional[int] = None,
    min_element_size: int = 1,
) -> R:
    length = decode_length(deserializer, max_length=max_length, min_element_size=min_element_size)
    return builder(decoder(deserializer) for _ in range(length))
