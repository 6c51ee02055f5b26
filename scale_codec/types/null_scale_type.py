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

from types import NoneType
from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.scale_type import ScaleType

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder


class NullScaleType(ScaleType[None]):
    """ Represents the unit value `None`, which takes zero bytes.
    """

    _is_hashable = True

    @override
    def is_zero_size(self) -> bool:
        return True

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        # XXX: usually we expect NoneType as type_, but in some cases it can come-in as None, and we take that too
        if type_ is None or type_ is NoneType:
            return cls()
        raise UnsupportedTypeError('expected None type')

    @override
    def _check_value(self, value: None, /, *, deep: bool) -> None:
        if value is not None:
            raise TypeError('expected None')

    @override
    def _serialize(self, encoder: ScaleEncoder, value: None, /) -> None:
        encoder.encode_unit()

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> None:
        return decoder.decode_unit()
