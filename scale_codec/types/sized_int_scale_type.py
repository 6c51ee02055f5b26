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


def _check_int(value: Any) -> None:
    # bool is a subclass of int, but a bool where an integer is expected is almost certainly a mistake
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f'expected integer, not {type(value).__name__}')


class _SizedIntScaleType(ScaleType[int]):
    """ Base class for classes that represent `int` values with a fixed size and signedness.

    >>> Int16ScaleType().to_bytes(-2).hex()
    'feff'
    >>> Uint32ScaleType().from_bytes(bytes.fromhex('00010000'))
    256
    >>> try:
    ...     Uint8ScaleType().to_bytes(256)
    ... except ValueError as e:
    ...     print(*e.args)
    256 is above the upper bound of 255
    """

    _is_hashable = True
    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if not is_subclass(type_, int):
            raise UnsupportedTypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        _check_int(value)
        upper_bound = self._upper_bound_value()
        lower_bound = self._lower_bound_value()
        if value > upper_bound:
            raise ValueError(f'{value} is above the upper bound of {upper_bound}')
        if value < lower_bound:
            raise ValueError(f'{value} is below the lower bound of {lower_bound}')

    @override
    def _serialize(self, encoder: ScaleEncoder, value: int, /) -> None:
        if self._signed:
            encoder.encode_sint(value, bits=self._byte_size * 8)
        else:
            encoder.encode_uint(value, bits=self._byte_size * 8)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> int:
        if self._signed:
            return decoder.decode_sint(bits=self._byte_size * 8)
        else:
            return decoder.decode_uint(bits=self._byte_size * 8)


class Uint8ScaleType(_SizedIntScaleType):
    _signed = False
    _byte_size = 1


class Uint16ScaleType(_SizedIntScaleType):
    _signed = False
    _byte_size = 2


class Uint32ScaleType(_SizedIntScaleType):
    _signed = False
    _byte_size = 4


class Uint64ScaleType(_SizedIntScaleType):
    _signed = False
    _byte_size = 8


class Uint128ScaleType(_SizedIntScaleType):
    _signed = False
    _byte_size = 16


class Int8ScaleType(_SizedIntScaleType):
    _signed = True
    _byte_size = 1


class Int16ScaleType(_SizedIntScaleType):
    _signed = True
    _byte_size = 2


class Int32ScaleType(_SizedIntScaleType):
    _signed = True
    _byte_size = 4


class Int64ScaleType(_SizedIntScaleType):
    _signed = True
    _byte_size = 8


class Int128ScaleType(_SizedIntScaleType):
    _signed = True
    _byte_size = 16
