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

from functools import reduce
from operator import or_
from types import NoneType, UnionType
# XXX: ignore attr-defined because mypy doesn't recognize it, even though all version of python that we support; have
#      this defined, even if it's an internal class
from typing import TYPE_CHECKING, Any, TypeVar, _UnionGenericAlias as UnionGenericAlias  # type: ignore[attr-defined]

from typing_extensions import Self, override

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.bool_scale_type import BoolScaleType
from scale_codec.types.scale_type import ScaleType
from scale_codec.utils.typing import get_args

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder

V = TypeVar('V')


class OptionalScaleType(ScaleType[V | None]):
    """ Represents a scale_type that is either `V` or `None`.

    `bool | None` is special cased to the single byte encoding: `00` for None, `01` for False and `02` for True.

    >>> from scale_codec.types import make_scale_type
    >>> make_scale_type(str | None).to_bytes('foo').hex()
    '010c666f6f'
    >>> make_scale_type(bool | None).to_bytes(False).hex()
    '01'

    An union with more than one type besides `None` is an optional of the remaining union:

    >>> make_scale_type(str | bytes | None).to_bytes(b'\\x01').hex()
    '01010401'
    """

    __slots__ = ('_is_hashable', '_value')

    _value: ScaleType[V]

    def __init__(self, scale_type: ScaleType[V]) -> None:
        self._value = scale_type
        self._is_hashable = scale_type.is_hashable()

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if not isinstance(type_, (UnionType, UnionGenericAlias)):
            raise UnsupportedTypeError('expected type union')
        args = get_args(type_)
        assert args, 'union always has args'
        if NoneType not in args:
            raise UnsupportedTypeError('type must be either `None | T` or `T | None`')
        not_none_types = [arg for arg in args if arg is not NoneType]
        not_none_type = reduce(or_, not_none_types)
        return cls(ScaleType.from_type(not_none_type, type_map=type_map))

    def _is_option_bool(self) -> bool:
        return isinstance(self._value, BoolScaleType)

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, encoder: ScaleEncoder, value: V | None, /) -> None:
        if self._is_option_bool():
            if value is not None:
                self._value._check_value(value, deep=False)
            encoder.encode_option_bool(value)  # type: ignore[arg-type]
        else:
            encoder.encode_option(value, self._value.serialize)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> V | None:
        if self._is_option_bool():
            return decoder.decode_option_bool()  # type: ignore[return-value]
        return decoder.decode_option(self._value.deserialize)
