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


from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from typing_extensions import Self, override

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType
from scale_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder


class _FixedSizeBytesScaleType(ScaleType[bytes]):
    """ Base class for byte arrays whose size is part of the type, they are written without a length prefix.

    >>> H160ScaleType().to_bytes(bytes(range(20))).hex()
    '000102030405060708090a0b0c0d0e0f10111213'
    >>> try:
    ...     H256ScaleType().to_bytes(b'short')
    ... except ValueError as e:
    ...     print(*e.args)
    value has 5 bytes, expected 32
    """

    _is_hashable = True
    _size: ClassVar[int]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if not is_subclass(type_, bytes):
            raise UnsupportedTypeError('expected bytes-like type')
        return cls()

    @override
    def _check_value(self, value: bytes, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f'expected bytes type, not {type(value).__name__}')
        if len(value) != self._size:
            raise ValueError(f'value has {len(value)} bytes, expected {self._size}')

    @override
    def _serialize(self, encoder: ScaleEncoder, value: bytes, /) -> None:
        encoder.encode_fixed_bytes(bytes(value), length=self._size)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> bytes:
        return decoder.decode_fixed_bytes(length=self._size)


class H160ScaleType(_FixedSizeBytesScaleType):
    _size = 20


class H256ScaleType(_FixedSizeBytesScaleType):
    _size = 32


class H512ScaleType(_FixedSizeBytesScaleType):
    _size = 64
