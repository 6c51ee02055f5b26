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
from collections import deque
from collections.abc import Collection, Hashable, Iterable, Set
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


class _CollectionScaleType(ScaleType[Collection[T]], ABC):
    """ Used as base for ScaleType classes that represent variable-length sequences.

    All of them share the same encoding, a compact count followed by the elements, so a value encoded as a `list` can
    be decoded as a `set` and the other way around.
    """
    __slots__ = ('_item',)

    _is_hashable = False
    _item: ScaleType[T]

    def __init__(self, item_scale_type: ScaleType[T], /) -> None:
        self._item = item_scale_type

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        member_type = cls._get_member_type(type_)
        member_scale_type = ScaleType.from_type(member_type, type_map=type_map)
        return cls(member_scale_type)

    @classmethod
    def _get_member_type(cls, type_: Any) -> Any:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, Collection):
            raise UnsupportedTypeError('expected Collection type')
        args = get_args(type_)
        if not args or len(args) != 1:
            raise UnsupportedTypeError(f'expected {pretty_type(origin_type)}[<type>]')
        return args[0]

    def _check_item(self, item: T) -> None:
        self._item._check_value(item, deep=True)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, Collection) or isinstance(value, (str, bytes, bytearray)):
            raise TypeError(f'expected a collection, not {type(value).__name__}')
        if deep:
            for i in value:
                self._check_item(i)

    @override
    def _serialize(self, encoder: ScaleEncoder, value: Collection[T], /) -> None:
        encoder.encode_seq(value, self._item.serialize)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> Collection[T]:
        min_item_size = 0 if self._item.is_zero_size() else 1
        return decoder.decode_seq(self._item.deserialize, self._build, min_item_size=min_item_size)


class ListScaleType(_CollectionScaleType[T]):
    """ Represents builtin `list` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class DequeScaleType(_CollectionScaleType[T]):
    """ Represents builtin `collections.deque` values.
    """

    @override
    def _build(self, items: Iterable[T]) -> deque[T]:
        return deque(items)


class SetScaleType(_CollectionScaleType[H]):
    """ Represents builtin `set` values.

    Elements are written in the set's iteration order, which for most element types is not stable between runs, use a
    `list` or a `tuple[T, ...]` when the output must be reproducible.
    """

    @override
    def _build(self, items: Iterable[H]) -> Set[H]:
        return set(items)

    @override
    @classmethod
    def _get_member_type(cls, type_: Any) -> Any:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, Set):
            raise UnsupportedTypeError('expected Set type')
        member_type = super()._get_member_type(type_)
        if not is_origin_hashable(member_type):
            raise UnsupportedTypeError(f'{pretty_type(member_type)} is not hashable')
        return member_type

    @override
    def _check_item(self, item: H) -> None:
        if not isinstance(item, Hashable):
            raise TypeError('expected Hashable type')
        super()._check_item(item)


class FrozenSetScaleType(SetScaleType[H]):
    """ Represents builtin `frozenset` values.
    """

    # XXX: SetScaleType already enforces H to be hashable, but is not itself hashable, a frozenset, however, is hashable
    _is_hashable = True

    @override
    def _build(self, items: Iterable[H]) -> frozenset[H]:
        return frozenset(items)
