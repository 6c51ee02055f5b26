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

from typing import Any, NamedTuple, TypeVar, get_type_hints

from typing_extensions import override

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.record_scale_type import _RecordScaleType

N = TypeVar('N', bound=tuple)


class NamedTupleScaleType(_RecordScaleType[N]):
    """ Represents classes created with `typing.NamedTuple`, encoded like the plain tuple of their fields.
    """

    @override
    @classmethod
    def _check_class(cls, type_: Any) -> None:
        if not isinstance(type_, type) or not issubclass(type_, tuple):
            raise UnsupportedTypeError('expected NamedTuple type')
        if NamedTuple not in getattr(type_, '__orig_bases__', tuple()):
            raise UnsupportedTypeError('expected NamedTuple type')

    @override
    @classmethod
    def _field_types(cls, class_: type[N]) -> dict[str, Any]:
        try:
            hints = get_type_hints(class_)
        except NameError as e:
            raise UnsupportedTypeError(f'cannot resolve the annotations of {class_.__name__}: {e}') from e
        return {field_name: hints[field_name] for field_name in class_._fields}  # type: ignore[attr-defined]

    @override
    def _build(self, values: dict[str, Any]) -> N:
        return self._class(**values)
