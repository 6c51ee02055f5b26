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
The decoder is the dual of `ScaleEncoder`: the traversal asks for one event at a time and gets the decoded value.

Every read checks the remaining input first, nothing is ever read past the end, and malformed input raises a
`SerializationError` subclass that carries the position where the failing read started.

>>> dec = ScaleDecoder.build(bytes.fromhex('0c0102030c666f6f02'))
>>> dec.decode_seq(lambda d: d.decode_uint(bits=8))
[1, 2, 3]
>>> dec.decode_str()
'foo'
>>> dec.decode_option_bool()
True
>>> dec.finalize()

>>> dec = ScaleDecoder.build(bytes.fromhex('fd03'), max_collection_length=100)
>>> try:
...     dec.decode_seq(lambda d: d.decode_unit())
... except CollectionTooLargeError as e:
...     print(*e.args)
length 255 is above the maximum of 100 (at byte 0)
"""

from collections.abc import Collection, Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Callable, Optional, TypeVar

from scale_codec.conf.settings import DEFAULT_MAX_DEPTH
from scale_codec.serialization import CollectionTooLargeError, DepthLimitExceededError, Deserializer  # noqa: F401
from scale_codec.serialization.adapters import GenericDeserializerAdapter
from scale_codec.serialization.compound_encoding.array import decode_array
from scale_codec.serialization.compound_encoding.collection import decode_collection
from scale_codec.serialization.compound_encoding.mapping import decode_mapping
from scale_codec.serialization.compound_encoding.optional import decode_optional
from scale_codec.serialization.compound_encoding.tuple import decode_tuple
from scale_codec.serialization.compound_encoding.variant import decode_variant
from scale_codec.serialization.encoding.bool import decode_bool
from scale_codec.serialization.encoding.bytes import decode_bytes
from scale_codec.serialization.encoding.char import decode_char
from scale_codec.serialization.encoding.compact import decode_compact
from scale_codec.serialization.encoding.int import INT_BIT_WIDTHS, decode_int
from scale_codec.serialization.encoding.option_bool import decode_option_bool
from scale_codec.serialization.encoding.utf8 import decode_utf8
from scale_codec.serialization.types import Buffer

T = TypeVar('T')
KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Collection)
M = TypeVar('M', bound=Mapping)

ElementDecoder = Callable[['ScaleDecoder'], T]


def _check_bits(bits: int) -> None:
    if bits not in INT_BIT_WIDTHS:
        raise ValueError(f'unsupported integer width: {bits} bits')


def _decode_nothing(decoder: 'ScaleDecoder') -> None:
    return None


class ScaleDecoder(GenericDeserializerAdapter[Deserializer]):
    """ Event-driven SCALE reader over any `Deserializer`.

    When `max_collection_length` is set, sequences, maps, byte strings and strings whose declared length is above it
    are rejected with `CollectionTooLargeError` before any element is read. Options, variants, sequences, maps, arrays
    and tuples nested deeper than `max_depth` raise `DepthLimitExceededError`.
    """

    max_collection_length: Optional[int]
    max_depth: int

    def __init__(
        self,
        deserializer: Deserializer,
        *,
        max_collection_length: Optional[int] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        super().__init__(deserializer)
        self.max_collection_length = max_collection_length
        self.max_depth = max_depth
        self._depth = 0

    @classmethod
    def build(
        cls,
        data: Buffer,
        *,
        max_collection_length: Optional[int] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> 'ScaleDecoder':
        return cls(
            Deserializer.build_bytes_deserializer(data),
            max_collection_length=max_collection_length,
            max_depth=max_depth,
        )

    @contextmanager
    def _nested(self) -> Iterator[None]:
        if self._depth >= self.max_depth:
            raise DepthLimitExceededError(f'nesting is limited to {self.max_depth} levels', position=self.cur_pos())
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def decode_uint(self, *, bits: int) -> int:
        _check_bits(bits)
        return decode_int(self, length=bits // 8, signed=False)

    def decode_sint(self, *, bits: int) -> int:
        _check_bits(bits)
        return decode_int(self, length=bits // 8, signed=True)

    def decode_bool(self) -> bool:
        return decode_bool(self)

    def decode_compact(self) -> int:
        return decode_compact(self)

    def decode_char(self) -> str:
        return decode_char(self)

    def decode_unit(self) -> None:
        return None

    def decode_option(self, decoder: ElementDecoder[T]) -> Optional[T]:
        with self._nested():
            return decode_optional(self, decoder)

    def decode_option_bool(self) -> Optional[bool]:
        return decode_option_bool(self)

    def decode_variant(self, decoders: Sequence[ElementDecoder[Any]]) -> tuple[int, Any]:
        """ Read the variant index and decode the payload with the decoder at that index.

        The number of decoders is the variant count, use `decode_unit_variant` when no variant carries a payload.
        """
        with self._nested():
            return decode_variant(self, decoders)

    def decode_unit_variant(self, variant_count: int) -> int:
        with self._nested():
            index, _ = decode_variant(self, [_decode_nothing] * variant_count)
        return index

    def decode_array(self, decoder: ElementDecoder[T], *, length: int,
                     builder: Callable[[Iterable[T]], R] = tuple) -> R:  # type: ignore[assignment]
        with self._nested():
            return decode_array(self, decoder, builder, length=length)

    def decode_fixed_bytes(self, *, length: int) -> bytes:
        return bytes(self.read_bytes(length))

    def decode_seq(self, decoder: ElementDecoder[T],
                   builder: Callable[[Iterable[T]], R] = list,  # type: ignore[assignment]
                   *, min_item_size: int = 1) -> R:
        """ Read a compact count and that many elements.

        The count is checked against the input left, assuming each element takes at least `min_item_size` bytes. Pass 0
        for elements that encode to nothing.
        """
        with self._nested():
            return decode_collection(
                self,
                decoder,
                builder,
                max_length=self.max_collection_length,
                min_element_size=min_item_size,
            )

    def decode_bytes(self) -> bytes:
        return decode_bytes(self, max_length=self.max_collection_length)

    def decode_str(self) -> str:
        return decode_utf8(self, max_length=self.max_collection_length)

    def decode_map(
        self,
        key_decoder: ElementDecoder[KT],
        value_decoder: ElementDecoder[VT],
        builder: Callable[[Iterable[tuple[KT, VT]]], M] = dict,  # type: ignore[assignment]
        *,
        min_entry_size: int = 1,
    ) -> M:
        with self._nested():
            return decode_mapping(
                self,
                key_decoder,
                value_decoder,
                builder,
                max_length=self.max_collection_length,
                min_entry_size=min_entry_size,
            )

    def decode_tuple(self, decoders: tuple[ElementDecoder[Any], ...]) -> tuple[Any, ...]:
        with self._nested():
            return decode_tuple(self, decoders)
