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

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import Self, override

from scale_codec.serialization.encoding.variant import check_variant_count
from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType
from scale_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder

E = TypeVar('E', bound=Enum)


class EnumScaleType(ScaleType[E]):
    """ Represents `Enum` subclasses as variants without payload.

    The variant index is the position of the member in definition order, member values are not used, so changing the
    value of a member keeps the encoding while reordering members changes it. Aliases are not members and don't take an
    index.

    >>> from enum import Enum
    >>> class Color(Enum):
    ...     RED = 'r'
    ...     GREEN = 'g'
    ...     BLUE = 'b'
    >>> EnumScaleType(Color).to_bytes(Color.BLUE).hex()
    '02'
    >>> EnumScaleType(Color).from_bytes(b'\\x01')
    <Color.GREEN: 'g'>
    """

    __slots__ = ('_enum_class', '_members', '_indexes')

    _is_hashable = True

    def __init__(self, enum_class: type[E]) -> None:
        self._enum_class = enum_class
        self._members: tuple[E, ...] = tuple(enum_class)
        check_variant_count(len(self._members))
        self._indexes: dict[E, int] = {member: index for index, member in enumerate(self._members)}

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise UnsupportedTypeError('expected Enum subclass')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._enum_class):
            raise TypeError(f'expected {self._enum_class.__name__}')

    @override
    def _serialize(self, encoder: ScaleEncoder, value: E, /) -> None:
        encoder.encode_variant(self._indexes[value], len(self._members))

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> E:
        return self._members[decoder.decode_unit_variant(len(self._members))]
