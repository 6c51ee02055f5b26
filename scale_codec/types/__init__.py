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


from collections import OrderedDict, deque
from dataclasses import dataclass
from enum import Enum
from types import NoneType, UnionType
from typing import Any, NamedTuple, Union

from scale_codec.primitives import H160, H256, H512, I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, Char, Compact
from scale_codec.types.bool_scale_type import BoolScaleType
from scale_codec.types.bytes_scale_type import BytesScaleType
from scale_codec.types.char_scale_type import CharScaleType
from scale_codec.types.collection_scale_type import (
    DequeScaleType,
    FrozenSetScaleType,
    ListScaleType,
    SetScaleType,
)
from scale_codec.types.compact_scale_type import CompactScaleType
from scale_codec.types.dataclass_scale_type import DataclassScaleType
from scale_codec.types.enum_scale_type import EnumScaleType
from scale_codec.types.fixed_size_bytes_scale_type import H160ScaleType, H256ScaleType, H512ScaleType
from scale_codec.types.map_scale_type import DictScaleType, OrderedDictScaleType
from scale_codec.types.namedtuple_scale_type import NamedTupleScaleType
from scale_codec.types.null_scale_type import NullScaleType
from scale_codec.types.optional_scale_type import OptionalScaleType
from scale_codec.types.scale_type import ScaleType
from scale_codec.types.sized_int_scale_type import (
    Int8ScaleType,
    Int16ScaleType,
    Int32ScaleType,
    Int64ScaleType,
    Int128ScaleType,
    Uint8ScaleType,
    Uint16ScaleType,
    Uint32ScaleType,
    Uint64ScaleType,
    Uint128ScaleType,
)
from scale_codec.types.str_scale_type import StrScaleType
from scale_codec.types.tuple_scale_type import TupleScaleType
from scale_codec.types.union_scale_type import UnionScaleType
from scale_codec.types.utils import TypeAliasMap, TypeToScaleTypeMap, VariantUnion

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_SCALE_TYPE_MAP',
    'BoolScaleType',
    'BytesScaleType',
    'CharScaleType',
    'CompactScaleType',
    'DataclassScaleType',
    'DequeScaleType',
    'DictScaleType',
    'EnumScaleType',
    'FrozenSetScaleType',
    'H160ScaleType',
    'H256ScaleType',
    'H512ScaleType',
    'Int8ScaleType',
    'Int16ScaleType',
    'Int32ScaleType',
    'Int64ScaleType',
    'Int128ScaleType',
    'ListScaleType',
    'NamedTupleScaleType',
    'NullScaleType',
    'OptionalScaleType',
    'OrderedDictScaleType',
    'ScaleType',
    'SetScaleType',
    'StrScaleType',
    'TupleScaleType',
    'TypeAliasMap',
    'TypeToScaleTypeMap',
    'Uint8ScaleType',
    'Uint16ScaleType',
    'Uint32ScaleType',
    'Uint64ScaleType',
    'Uint128ScaleType',
    'UnionScaleType',
    'make_scale_type',
]

DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    # XXX: technically types.UnionType is not a type, so mypy complains, but for our purposes it is a type
    Union: UnionType,  # type: ignore[dict-item]
    bytearray: bytes,
}

# Mapping between types and ScaleType classes.
DEFAULT_TYPE_TO_SCALE_TYPE_MAP: TypeToScaleTypeMap = {
    # builtin types:
    bool: BoolScaleType,
    bytes: BytesScaleType,
    dict: DictScaleType,
    frozenset: FrozenSetScaleType,
    list: ListScaleType,
    set: SetScaleType,
    str: StrScaleType,
    tuple: TupleScaleType,
    # XXX: technically None is not a type, type[None]/NoneType is, both can come up
    None: NullScaleType,
    NoneType: NullScaleType,
    # other Python types:
    deque: DequeScaleType,
    OrderedDict: OrderedDictScaleType,
    UnionType: OptionalScaleType,
    VariantUnion: UnionScaleType,
    NamedTuple: NamedTupleScaleType,
    # XXX: dataclasses and enums are matched with is_dataclass()/issubclass(), not by their own class
    dataclass: DataclassScaleType,
    Enum: EnumScaleType,
    # SCALE types:
    U8: Uint8ScaleType,
    U16: Uint16ScaleType,
    U32: Uint32ScaleType,
    U64: Uint64ScaleType,
    U128: Uint128ScaleType,
    I8: Int8ScaleType,
    I16: Int16ScaleType,
    I32: Int32ScaleType,
    I64: Int64ScaleType,
    I128: Int128ScaleType,
    Compact: CompactScaleType,
    Char: CharScaleType,
    H160: H160ScaleType,
    H256: H256ScaleType,
    H512: H512ScaleType,
}

DEFAULT_TYPE_MAP = ScaleType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_SCALE_TYPE_MAP)


def make_scale_type(type_: Any, /) -> ScaleType[Any]:
    """ Like ScaleType.from_type, but with the default maps.

    If you need to customize the mapping use `ScaleType.from_type` instead.

    >>> from scale_codec.primitives import U16
    >>> make_scale_type(list[U16]).to_bytes([1, 2]).hex()
    '0801000200'
    """
    return ScaleType.from_type(type_, type_map=DEFAULT_TYPE_MAP)
