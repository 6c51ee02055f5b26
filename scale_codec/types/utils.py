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


from collections.abc import Hashable, Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum
from functools import reduce
from operator import or_
from types import NoneType, UnionType
# XXX: ignore attr-defined because mypy doesn't recognize it, even though all version of python that we support; have
#      this defined, even if it's an internal class
from typing import _UnionGenericAlias  # type: ignore[attr-defined]
from typing import TYPE_CHECKING, Any, ForwardRef, Iterator, NamedTuple, TypeAlias, Union

from structlog import get_logger

from scale_codec.serialization.exceptions import UnsupportedTypeError
from scale_codec.utils.typing import get_args, get_origin, is_subclass, unwrap_type_alias

if TYPE_CHECKING:
    from scale_codec.types import ScaleType


logger = get_logger()

TypeAliasMap: TypeAlias = Mapping[Any, type]
TypeToScaleTypeMap: TypeAlias = Mapping[Any, type['ScaleType']]


class VariantUnion:
    """ Key used in a `ScaleType.TypeMap` for unions that don't include `None`, like `A | B | C`.

    Unions that include `None` are optionals and use the `UnionType` key instead.
    """


# hints for commonly used annotations that have no SCALE encoding
_UNSUPPORTED_HINTS: dict[Any, str] = {
    int: 'SCALE integers need a declared width, use one of U8..U128, I8..I128 or Compact',
    float: 'SCALE does not define floating-point numbers',
    complex: 'SCALE does not define complex numbers',
}


def get_origin_classes(type_: Any) -> Iterator[type]:
    """ This util function is useful to generalize over a type T and unions A | B.

    A simple type T would be yielded directly, and an union will yield each type in it. Only origin types are yielded,
    arguments are discarded.

    >>> list(get_origin_classes(str))
    [<class 'str'>]
    >>> list(get_origin_classes(str | bytes))
    [<class 'str'>, <class 'bytes'>]
    >>> list(get_origin_classes(set[str] | dict[str, bool]))
    [<class 'set'>, <class 'dict'>]
    """
    origin_type = get_origin(type_) or type_
    if origin_type is UnionType or origin_type is Union:
        for arg_type in get_args(type_):
            yield get_origin(arg_type) or arg_type
    else:
        yield origin_type


def is_origin_hashable(type_: Any) -> bool:
    """ Checks whether the given type signature satisfies `collections.abc.Hashable`.

    This check ignores type arguments, but takes into account all types of an union and resolves NewTypes.

    >>> is_origin_hashable(str)
    True
    >>> is_origin_hashable(str | bytes | frozenset)
    True
    >>> is_origin_hashable(str | bytes | set)
    False
    >>> is_origin_hashable(list[str])
    False
    >>> from scale_codec.primitives import U32
    >>> is_origin_hashable(U32)
    True

    Even though list is not hashable, a frozenset[list] is, simply because arguments are ignored:
    >>> is_origin_hashable(frozenset[list])
    True
    """
    return all(_is_origin_hashable(origin_class) for origin_class in get_origin_classes(type_))


def _is_origin_hashable(origin_class: Any) -> bool:
    """ Inner implementation of is_origin_hashable, only checks a single origin class. """
    if origin_class is None or origin_class is NoneType:
        return True
    return is_subclass(origin_class, Hashable)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(None)
    'None'
    >>> pretty_type(dict[str, bool])
    'dict[str, bool]'
    >>> pretty_type(bytes)
    'bytes'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


# XXX: _verbose argument is used to help with doctest
def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    For example, `bytearray` is mapped to `bytes` and `Optional[T]` to `T | None` in the default alias map:

    >>> from typing import Optional
    >>> orig_type = tuple[str, list[Optional[bytearray]], dict[str, bytearray]]
    >>> from scale_codec.types import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(orig_type, alias_map, _verbose=False)
    tuple[str, list[bytes | None], dict[str, bytes]]
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    type_ = unwrap_type_alias(type_)
    origin_type = get_origin(type_) or type_
    aliased_origin: Any
    replaced = False

    # XXX: special case, replace typing.Union with types.UnionType
    if origin_type is Union:
        aliased_origin = UnionType
    elif _is_hashable_key(origin_type) and origin_type in alias_map:
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    type_args = get_args(type_) if hasattr(type_, '__args__') else ()
    if not type_args:
        # normal case when there aren't type arguments (also covers `tuple[()]`, which is kept as is)
        return (aliased_origin if replaced else type_), replaced

    # use _get_aliased_type for recursion so we don't log multiple times when a replacement happens
    aliased_args_replaced = [_get_aliased_type(arg, alias_map) for arg in type_args]
    aliased_args, args_replaced = zip(*aliased_args_replaced)
    replaced |= any(args_replaced)

    if aliased_origin is UnionType:
        # XXX: special case, UnionType can't be instantiated directly, this is the simplest way to do it
        final_type = reduce(or_, aliased_args)
        assert isinstance(final_type, (UnionType, _UnionGenericAlias)), '| of types results in union'
        return final_type, replaced

    if not replaced:
        return type_, False

    assert hasattr(aliased_origin, '__class_getitem__'), 'we must have an indexable class at this point'
    return aliased_origin[tuple(aliased_args)], replaced


def _is_hashable_key(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def get_usable_origin_type(type_: Any, /, *, type_map: 'ScaleType.TypeMap', _verbose: bool = True) -> Any:
    """ The purpose of this function is to map a given type into a type that is usable in a ScaleType.TypeMap

    It takes into account type-aliasing according to ScaleType.TypeMap.alias_map. If the given type cannot be used in
    the given type_map, an `UnsupportedTypeError` (which is a `TypeError`) will be raised.

    The returned type is such that it is guaranteed to exist in `type_map.scale_types_map`.

    >>> from scale_codec.types import DEFAULT_TYPE_MAP as default_type_map
    >>> get_usable_origin_type(list[bytearray], type_map=default_type_map, _verbose=False)
    <class 'list'>
    >>> get_usable_origin_type(str | bytes, type_map=default_type_map, _verbose=False).__name__
    'VariantUnion'
    >>> try:
    ...     get_usable_origin_type(int, type_map=default_type_map, _verbose=False)
    ... except UnsupportedTypeError as e:
    ...     print(*e.args)
    type int is not supported: SCALE integers need a declared width, use one of U8..U128, I8..I128 or Compact
    """
    if isinstance(type_, (str, ForwardRef)):
        raise UnsupportedTypeError('string annotations are only supported in the fields of dataclasses and namedtuples')

    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=_verbose)
    usable_origin: Any = get_origin(aliased_type) or aliased_type
    scale_types_map = type_map.scale_types_map

    if usable_origin is UnionType:
        # When it's an union and None is not in it, it's not Optional, either a specific union is registered by its
        # tuple of args or it's a generic variant union
        args = get_args(aliased_type)
        if NoneType not in args:
            usable_origin = args if args in scale_types_map else VariantUnion

    if _is_hashable_key(usable_origin) and usable_origin in scale_types_map:
        return usable_origin

    if isinstance(aliased_type, type):
        if NamedTuple in scale_types_map and NamedTuple in getattr(aliased_type, '__orig_bases__', tuple()):
            return NamedTuple
        if dataclass in scale_types_map and is_dataclass(aliased_type):
            return dataclass
        if Enum in scale_types_map and issubclass(aliased_type, Enum):
            return Enum

    message = f'type {pretty_type(type_)} is not supported'
    hint = _UNSUPPORTED_HINTS.get(type_) if _is_hashable_key(type_) else None
    if hint is not None:
        message = f'{message}: {hint}'
    raise UnsupportedTypeError(message)
