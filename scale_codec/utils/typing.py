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

from types import UnionType
from typing import Any, get_args as _typing_get_args, get_origin as _typing_get_origin

from typing_extensions import TypeAliasType


def get_origin(t: Any, /) -> Any:
    """ Same as `typing.get_origin`, but a PEP 695 alias is looked through first.

    >>> type Bytes = list[int]
    >>> get_origin(Bytes)
    <class 'list'>
    >>> get_origin(int) is None
    True
    """
    return _typing_get_origin(unwrap_type_alias(t))


def get_args(t: Any, /) -> tuple[Any, ...]:
    """ Same as `typing.get_args`, but a PEP 695 alias is looked through first.

    >>> get_args(dict[str, bool])
    (<class 'str'>, <class 'bool'>)
    """
    return _typing_get_args(unwrap_type_alias(t))


def is_type_alias(t: Any, /) -> bool:
    """ Whether `t` was created by a `type X = ...` statement (or `typing_extensions.TypeAliasType`).
    """
    # on older Python versions typing_extensions has its own class, in newer ones it re-exports typing's
    return isinstance(t, TypeAliasType) or type(t).__name__ == 'TypeAliasType'


def unwrap_type_alias(t: Any, /) -> Any:
    """ Follow `type X = ...` aliases until a regular annotation is reached.

    >>> type Inner = dict[str, int]
    >>> type Outer = Inner
    >>> unwrap_type_alias(Outer)
    dict[str, int]
    >>> unwrap_type_alias(bytes)
    <class 'bytes'>
    """
    while is_type_alias(t):
        t = t.__value__
    return t


def is_subclass(cls: type, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Reimplements issubclass() with support for recursive NewType classes.

    Normal behavior from `issubclass`:

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(bool, bytes | str)
    False

    But `is_subclass` also works when a NewType is given as arg 1:

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> M = NewType('M', N)
    >>> is_subclass(M, int)
    True
    >>> is_subclass(M, str)
    False
    """
    while (super_type := getattr(cls, '__supertype__', None)) is not None:
        cls = super_type
    if not isinstance(cls, type):
        return False
    return issubclass(cls, class_or_tuple)
