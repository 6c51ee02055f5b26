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
The encoder receives one call per value event and appends the SCALE encoding of that event to its byte sink.

Composite events take callbacks for their elements, the callbacks receive the same encoder, and the composite is
complete when the callback sequence returns.

>>> enc = ScaleEncoder.build()
>>> enc.encode_seq([1, 2, 3], lambda e, v: e.encode_uint(v, bits=8))
>>> enc.encode_str('foo')
>>> enc.encode_option_bool(True)
>>> enc.to_bytes().hex()
'0c0102030c666f6f02'

>>> enc = ScaleEncoder.build(max_bytes=2)
>>> try:
...     enc.encode_uint(1, bits=32)
... except OutputLimitExceededError as e:
...     print(*e.args)
output is limited to 2 bytes
"""

from collections.abc import Collection, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Callable, Optional, TypeVar

from scale_codec.conf.settings import DEFAULT_MAX_DEPTH
from scale_codec.serialization import DepthLimitExceededError, OutputLimitExceededError, Serializer  # noqa: F401
from scale_codec.serialization.adapters import GenericSerializerAdapter
from scale_codec.serialization.compound_encoding.array import encode_array
from scale_codec.serialization.compound_encoding.collection import encode_collection
from scale_codec.serialization.compound_encoding.mapping import encode_mapping
from scale_codec.serialization.compound_encoding.optional import encode_optional
from scale_codec.serialization.compound_encoding.tuple import encode_tuple
from scale_codec.serialization.compound_encoding.variant import encode_variant
from scale_codec.serialization.encoding.bool import encode_bool
from scale_codec.serialization.encoding.bytes import encode_bytes
from scale_codec.serialization.encoding.char import encode_char
from scale_codec.serialization.encoding.compact import encode_compact
from scale_codec.serialization.encoding.int import INT_BIT_WIDTHS, encode_int
from scale_codec.serialization.encoding.option_bool import encode_option_bool
from scale_codec.serialization.encoding.utf8 import encode_utf8

T = TypeVar('T')
KT = TypeVar('KT')
VT = TypeVar('VT')

ElementEncoder = Callable[['ScaleEncoder', T], None]


def _check_bits(bits: int) -> None:
    if bits not in INT_BIT_WIDTHS:
        raise ValueError(f'unsupported integer width: {bits} bits')


def _encode_nothing(encoder: 'ScaleEncoder', value: Any) -> None:
    pass


class ScaleEncoder(GenericSerializerAdapter[Serializer]):
    """ Event-driven SCALE writer over any `Serializer`.

    Shape errors cannot happen here, a traversal that produces a well-formed event stream always encodes. The only
    failures are values that cannot be represented at all (raised as `ValueError`) and exceeding the output ceiling
    (`OutputLimitExceededError`). Composites nested deeper than `max_depth` raise `DepthLimitExceededError`.
    """

    max_depth: int

    def __init__(self, serializer: Serializer, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        super().__init__(serializer)
        self.max_depth = max_depth
        self._depth = 0

    @classmethod
    def build(cls, *, max_bytes: Optional[int] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> 'ScaleEncoder':
        """ Create an encoder over a fresh in-memory buffer, optionally capped at `max_bytes`.
        """
        return cls(Serializer.build_bytes_serializer().with_optional_max_bytes(max_bytes), max_depth=max_depth)

    @contextmanager
    def _nested(self) -> Iterator[None]:
        if self._depth >= self.max_depth:
            raise DepthLimitExceededError(f'nesting is limited to {self.max_depth} levels', position=self.cur_pos())
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def to_bytes(self) -> bytes:
        return bytes(self.finalize())

    def encode_uint(self, value: int, *, bits: int) -> None:
        _check_bits(bits)
        encode_int(self, value, length=bits // 8, signed=False)

    def encode_sint(self, value: int, *, bits: int) -> None:
        _check_bits(bits)
        encode_int(self, value, length=bits // 8, signed=True)

    def encode_bool(self, value: bool) -> None:
        encode_bool(self, value)

    def encode_compact(self, value: int) -> None:
        encode_compact(self, value)

    def encode_char(self, value: str) -> None:
        encode_char(self, value)

    def encode_unit(self) -> None:
        pass

    def encode_option(self, value: Optional[T], encoder: ElementEncoder[T]) -> None:
        with self._nested():
            encode_optional(self, value, encoder)

    def encode_option_bool(self, value: Optional[bool]) -> None:
        encode_option_bool(self, value)

    def encode_variant(
        self,
        index: int,
        variant_count: int,
        value: Any = None,
        encoder: ElementEncoder[Any] = _encode_nothing,
    ) -> None:
        """ Write the variant index, then the payload through `encoder`. Unit variants have no payload.
        """
        with self._nested():
            encode_variant(self, index, value, encoder, variant_count=variant_count)

    def encode_array(self, values: Collection[T], encoder: ElementEncoder[T], *, length: int) -> None:
        with self._nested():
            encode_array(self, values, encoder, length=length)

    def encode_fixed_bytes(self, data: bytes, *, length: int) -> None:
        if len(data) != length:
            raise ValueError(f'expected {length} bytes, got {len(data)}')
        self.write_bytes(data)

    def encode_seq(self, values: Collection[T], encoder: ElementEncoder[T]) -> None:
        with self._nested():
            encode_collection(self, values, encoder)

    def encode_bytes(self, data: bytes) -> None:
        encode_bytes(self, data)

    def encode_str(self, value: str) -> None:
        encode_utf8(self, value)

    def encode_map(
        self,
        values: Mapping[KT, VT],
        key_encoder: ElementEncoder[KT],
        value_encoder: ElementEncoder[VT],
    ) -> None:
        with self._nested():
            encode_mapping(self, values, key_encoder, value_encoder)

    def encode_tuple(self, values: tuple[Any, ...], encoders: tuple[ElementEncoder[Any], ...]) -> None:
        with self._nested():
            encode_tuple(self, values, encoders)
