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


"""
Dataclasses are records: each field is encoded in the order it was declared, without names or a length prefix.

>>> from dataclasses import dataclass
>>> from scale_codec.primitives import I8
>>> @dataclass
... class Point:
...     x: I8
...     y: I8
>>> from scale_codec.types import make_scale_type
>>> make_scale_type(Point).to_bytes(Point(x=3, y=4)).hex()
'0304'
"""

from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import override

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.types.record_scale_type import _RecordScaleType

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


class DataclassScaleType(_RecordScaleType[D]):
    """ Represents instances of a dataclass, every field must be an `__init__` argument.
    """

    @override
    @classmethod
    def _check_class(cls, type_: Any) -> None:
        if not isinstance(type_, type) or not is_dataclass(type_):
            raise UnsupportedTypeError('expected a dataclass')
        for field in fields(type_):
            if not field.init:
                raise UnsupportedTypeError(f'field {field.name} of {type_.__name__} is not an __init__ argument')

    @override
    @classmethod
    def _field_types(cls, class_: type[D]) -> dict[str, Any]:
        try:
            hints = get_type_hints(class_)
        except NameError as e:
            raise UnsupportedTypeError(f'cannot resolve the annotations of {class_.__name__}: {e}') from e
        # XXX: the order is important, `fields` follows the declaration order
        return {field.name: hints[field.name] for field in fields(class_)}

    @override
    def _build(self, values: dict[str, Any]) -> D:
        return self._class(**values)
