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
from types import NoneType, UnionType
# XXX: ignore attr-defined because mypy doesn't recognize it, even though all version of python that we support; have
#      this defined, even if it's an internal class
from typing import TYPE_CHECKING, Any, _UnionGenericAlias as UnionGenericAlias  # type: ignore[attr-defined]

from typing_extensions import Self, override

from scale_codec.serialization.encoding.variant import check_variant_count
from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType
from scale_codec.types.utils import pretty_type
from scale_codec.utils.typing import get_args, get_origin

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder


class UnionScaleType(ScaleType[Any]):
    """ Represents an union of distinct classes `A | B | C` as a variant type, a tagged union.

    The variant index is the position of the value's class in the union, so `A | B` and `B | A` are different types.
    Members must be classes and none of them can be a subclass of another, so that each value has exactly one variant.

    >>> from scale_codec.types import make_scale_type
    >>> make_scale_type(str | bytes).to_bytes(b'').hex()
    '0100'
    >>> make_scale_type(str | bytes).from_bytes(bytes.fromhex('000c666f6f'))
    'foo'
    """

    __slots__ = ('_is_hashable', '_classes', '_members')

    _classes: tuple[type, ...]
    _members: tuple[ScaleType, ...]

    def __init__(self, classes: Iterable[type], members: Iterable[ScaleType]) -> None:
        self._classes = tuple(classes)
        self._members = tuple(members)
        assert len(self._classes) == len(self._members)
        check_variant_count(len(self._members))
        self._is_hashable = all(member.is_hashable() for member in self._members)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if not isinstance(type_, (UnionType, UnionGenericAlias)):
            raise UnsupportedTypeError('expected type union')
        args = get_args(type_)
        if NoneType in args:
            raise UnsupportedTypeError('an union with None is an optional, not a variant')
        classes: list[type] = []
        for arg in args:
            origin = get_origin(arg) or arg
            if not isinstance(origin, type):
                raise UnsupportedTypeError(f'union members must be classes, {pretty_type(arg)} is not')
            classes.append(origin)
        for i, a in enumerate(classes):
            for b in classes[i + 1:]:
                if issubclass(a, b) or issubclass(b, a):
                    raise UnsupportedTypeError(f'union members {a.__name__} and {b.__name__} overlap')
        check_variant_count(len(classes))
        return cls(classes, (ScaleType.from_type(arg, type_map=type_map) for arg in args))

    def _index_of(self, value: Any) -> int:
        for index, class_ in enumerate(self._classes):
            if isinstance(value, class_):
                return index
        expected = ' | '.join(class_.__name__ for class_ in self._classes)
        raise TypeError(f'expected one of {expected}, not {type(value).__name__}')

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        index = self._index_of(value)
        if deep:
            self._members[index]._check_value(value, deep=True)

    @override
    def _serialize(self, encoder: ScaleEncoder, value: Any, /) -> None:
        index = self._index_of(value)
        encoder.encode_variant(index, len(self._members), value, self._members[index].serialize)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> Any:
        _, value = decoder.decode_variant([member.deserialize for member in self._members])
        return value
