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

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType
from scale_codec.utils.typing import is_subclass

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder


class CharScaleType(ScaleType[str]):
    """ Represents a `str` holding exactly one Unicode scalar value.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if not is_subclass(type_, str):
            raise UnsupportedTypeError('expected str type')
        return cls()

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise TypeError('expected str')
        if len(value) != 1:
            raise ValueError(f'expected a single character, got {len(value)}')

    @override
    def _serialize(self, encoder: ScaleEncoder, value: str, /) -> None:
        encoder.encode_char(value)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> str:
        return decoder.decode_char()
