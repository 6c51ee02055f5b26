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

from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import Hashable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import Self, override

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType
from scale_codec.types.utils import is_origin_hashable, pretty_type
from scale_codec.utils.typing import get_args, get_origin

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _MapScaleType(ScaleType[Mapping[H, T]], ABC):
    """ Base class to help implement ScaleType for mappings.

    Entries are written in the mapping's iteration order.

    >>> from scale_codec.types import make_scale_type
    >>> from scale_codec.primitives import U8
    >>> make_scale_type(dict[str, U8]).to_bytes({'a': 1, 'b': 2}).hex()
    '08046101046202'
    """

    __slots__ = ('_key', '_value')

    _key: ScaleType[H]
    _value: ScaleType[T]
    _is_hashable = False

    def __init__(self, key: ScaleType[H], value: ScaleType[T]) -> None:
        self._key = key
        self._value = value

    @abstractmethod
    def _build(self, items: Iterable[tuple[H, T]]) -> Mapping[H, T]:
        """ How to build the concrete map from an iterable of (key, value).
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, Mapping):
            raise UnsupportedTypeError('expected Mapping type')
        args = get_args(type_)
        if not args or len(args) != 2:
            raise UnsupportedTypeError(f'expected {pretty_type(origin_type)}[<key type>, <value type>]')
        key_type, value_type = args
        if not is_origin_hashable(key_type):
            raise UnsupportedTypeError(f'{pretty_type(key_type)} is not hashable')
        key_scale_type = ScaleType.from_type(key_type, type_map=type_map)
        assert key_scale_type.is_hashable(), 'hashable "types" must produce hashable "values"'
        return cls(key_scale_type, ScaleType.from_type(value_type, type_map=type_map))

    @override
    def _check_value(self, value: Mapping[H, T], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise TypeError('expected Mapping type')
        if deep:
            for k, v in value.items():
                self._key._check_value(k, deep=True)
                self._value._check_value(v, deep=True)

    @override
    def _serialize(self, encoder: ScaleEncoder, value: Mapping[H, T], /) -> None:
        encoder.encode_map(value, self._key.serialize, self._value.serialize)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> Mapping[H, T]:
        min_entry_size = 0 if self._key.is_zero_size() and self._value.is_zero_size() else 1
        return decoder.decode_map(
            self._key.deserialize,
            self._value.deserialize,
            self._build,
            min_entry_size=min_entry_size,
        )


class DictScaleType(_MapScaleType[H, T]):
    """ Represents builtin `dict` values.
    """

    @override
    def _build(self, items: Iterable[tuple[H, T]]) -> dict[H, T]:
        return dict(items)


class OrderedDictScaleType(_MapScaleType[H, T]):
    """ Represents `collections.OrderedDict` values.
    """

    @override
    def _build(self, items: Iterable[tuple[H, T]]) -> OrderedDict[H, T]:
        return OrderedDict(items)
