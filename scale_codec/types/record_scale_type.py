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

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from typing_extensions import Self, override

from scale_codec.types.scale_type import ScaleType
from scale_codec.types.utils import is_origin_hashable

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder

R = TypeVar('R')

# records whose fields are being resolved on the current thread, keyed by (class, id(type_map))
_resolving = threading.local()


def _pending_records() -> dict[tuple[type, int], '_RecordScaleType']:
    pending = getattr(_resolving, 'records', None)
    if pending is None:
        pending = _resolving.records = {}
    return pending


class _RecordScaleType(ScaleType[R], ABC):
    """ Base class for classes with named fields that are encoded positionally, in declaration order.

    Field annotations can be forward references, and a record can refer to itself through its fields (directly or
    through an union), the same instance is reused when the record is reached again while its fields are being
    resolved.
    """

    __slots__ = ('_class', '_fields', '_is_hashable')

    _class: type[R]
    _fields: Optional[dict[str, ScaleType]]

    def __init__(self, class_: type[R]) -> None:
        self._class = class_
        self._fields = None
        self._is_hashable = is_origin_hashable(class_)

    @classmethod
    @abstractmethod
    def _check_class(cls, type_: Any) -> None:
        """ Raise `UnsupportedTypeError` when `type_` is not a class this record type can handle.
        """
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def _field_types(cls, class_: type[R]) -> dict[str, Any]:
        """ The resolved annotation of each field, in the order they are encoded.
        """
        raise NotImplementedError

    @abstractmethod
    def _build(self, values: dict[str, Any]) -> R:
        """ How to build an instance from the decoded field values.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: ScaleType.TypeMap) -> Self:
        cls._check_class(type_)
        pending = _pending_records()
        key = (type_, id(type_map))
        if key in pending:
            return pending[key]  # type: ignore[return-value]
        record = cls(type_)
        pending[key] = record
        try:
            record._fields = {
                name: ScaleType.from_type(field_type, type_map=type_map)
                for name, field_type in cls._field_types(type_).items()
            }
        finally:
            del pending[key]
        return record

    @property
    def fields(self) -> dict[str, ScaleType]:
        assert self._fields is not None, 'fields are still being resolved'
        return self._fields

    @override
    def is_zero_size(self) -> bool:
        return all(field_scale_type.is_zero_size() for field_scale_type in self.fields.values())

    @override
    def _check_value(self, value: R, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance, not {type(value).__name__}')
        if deep:
            for name, field_scale_type in self.fields.items():
                field_scale_type._check_value(getattr(value, name), deep=True)

    @override
    def _serialize(self, encoder: ScaleEncoder, value: R, /) -> None:
        fields = self.fields
        encoder.encode_tuple(
            tuple(getattr(value, name) for name in fields),
            tuple(field_scale_type.serialize for field_scale_type in fields.values()),
        )

    @override
    def _deserialize(self, decoder: ScaleDecoder, /) -> R:
        fields = self.fields
        values = decoder.decode_tuple(tuple(field_scale_type.deserialize for field_scale_type in fields.values()))
        return self._build(dict(zip(fields, values)))
