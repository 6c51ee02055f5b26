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

from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from scale_codec.serialization.encoding.compact import MAX_COMPACT_VALUE
from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType
from scale_codec.types.sized_int_scale_type import _check_int
from scale_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder


class CompactScaleType(ScaleType[int]):
    """ Represents non-negative `int` values in the variable-length compact encoding.

    >>> CompactScaleType().to_bytes(64).hex()
    '0101'
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if not is_subclass(type_, int):
            raise UnsupportedTypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        _check_int(value)
        if value < 0:
            raise ValueError(f'{value} is negative, compact integers are unsigned')
        if value > MAX_COMPACT_VALUE:
            raise ValueError(f'{value} is too big for a compact integer')

    @override
    def _serialize(self, encoder: ScaleEncoder, value: int, /) -> None:
        encoder.encode_compact(value)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> int:
        return decoder.decode_compact()
