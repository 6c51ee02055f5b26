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

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType
from scale_codec.utils.typing import get_args, get_origin

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder


# XXX: we can't usefully describe the tuple type
class TupleScaleType(ScaleType[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    A variable size `tuple[T, ...]` is encoded like any other sequence, while a fixed size `tuple[A, B, C]` is just its
    elements concatenated, without any prefix.

    >>> from scale_codec.types import make_scale_type
    >>> from scale_codec.primitives import U8
    >>> make_scale_type(tuple[U8, ...]).to_bytes((1, 2)).hex()
    '080102'
    >>> make_scale_type(tuple[U8, str]).to_bytes((3, 'foo')).hex()
    '030c666f6f'
    """

    __slots__ = ('_is_hashable', '_varsize', '_args')

    _varsize: bool
    # we can't even parametrize ScaleType, lists are allowed in tuples and it's still hashable it just fails in runtime
    _args: tuple[ScaleType, ...]

    def __init__(self, args: ScaleType | Iterable[ScaleType]) -> None:
        if isinstance(args, ScaleType):
            self._varsize = True
            self._args = (args,)
            self._is_hashable = args.is_hashable()
        else:
            self._varsize = False
            self._args = tuple(args)
            self._is_hashable = all(arg_scale_type.is_hashable() for arg_scale_type in self._args)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, tuple):
            raise UnsupportedTypeError('expected tuple type')
        args = list(get_args(type_))
        if not args and not hasattr(type_, '__args__'):
            raise UnsupportedTypeError('expected tuple[<args...>]')
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise UnsupportedTypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(ScaleType.from_type(arg, type_map=type_map))
        else:
            return cls(ScaleType.from_type(arg, type_map=type_map) for arg in args)

    @override
    def is_zero_size(self) -> bool:
        return not self._varsize and all(arg_scale_type.is_zero_size() for arg_scale_type in self._args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, list)):
            raise TypeError('expected tuple-like')
        if not self._varsize and len(value) != len(self._args):
            raise TypeError(f'wrong tuple size, expected {len(self._args)} elements, got {len(value)}')
        if deep:
            if self._varsize:
                arg_scale_type, = self._args
                for i in value:
                    arg_scale_type._check_value(i, deep=True)
            else:
                for i, arg_scale_type in zip(value, self._args):
                    arg_scale_type._check_value(i, deep=True)

    @override
    def _serialize(self, encoder: ScaleEncoder, value: tuple, /) -> None:
        if self._varsize:
            assert len(self._args) == 1
            encoder.encode_seq(value, self._args[0].serialize)
        else:
            encoder.encode_tuple(tuple(value), tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> tuple:
        if self._varsize:
            assert len(self._args) == 1
            min_item_size = 0 if self._args[0].is_zero_size() else 1
            return decoder.decode_seq(self._args[0].deserialize, tuple, min_item_size=min_item_size)
        else:
            return decoder.decode_tuple(tuple(i.deserialize for i in self._args))
