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

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder


class BoolScaleType(ScaleType[bool]):
    """ Represents builtin `bool` values.
    """

    _is_hashable = True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        if type_ is not bool:
            raise UnsupportedTypeError('expected bool type')
        return cls()

    @override
    def _check_value(self, value: bool, /, *, deep: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError('expected boolean')

    @override
    def _serialize(self, encoder: ScaleEncoder, value: bool, /) -> None:
        encoder.encode_bool(value)

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> bool:
        return decoder.decode_bool()
