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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, NamedTuple, Optional, TypeVar, final

from typing_extensions import Self

from scale_codec.conf.settings import DEFAULT_MAX_DEPTH
from scale_codec.serialization.exceptions import DepthLimitExceededError
from scale_codec.types.utils import TypeAliasMap, TypeToScaleTypeMap, get_aliased_type, get_usable_origin_type
from scale_codec.utils.typing import unwrap_type_alias

if TYPE_CHECKING:
    from scale_codec.decoder import ScaleDecoder
    from scale_codec.encoder import ScaleEncoder

T = TypeVar('T')


class ScaleType(ABC, Generic[T]):
    """ This class is used to model a type with a known type signature and how it will be (de)serialized.

    A `ScaleType` is the traversal of one Python annotation: it walks a value of that type and emits the matching
    events on a `ScaleEncoder`, or asks a `ScaleDecoder` for the events in the same order and rebuilds the value.
    Instances are immutable once built and can be shared.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        scale_types_map: TypeToScaleTypeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> ScaleType[Any]:
        """ Instantiate a ScaleType instance from a type signature using the given maps.

        A `scale_types_map` associates concrete types to concrete ScaleType classes, while an `alias_map` associates
        types with substitute types to use instead. Invalid annotations raise `UnsupportedTypeError`.
        """
        type_ = unwrap_type_alias(type_)
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        scale_type = type_map.scale_types_map[usable_origin]
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        return scale_type._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Self:
        """ Instantiate a ScaleType instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        decide on using `ScaleType.from_type`, forwarding the given `type_map` to continue instantiating ScaleType
        specializations, this is the case particularly for compound ScaleTypes, like OptionalScaleType or
        DictScaleType.
        """
        # XXX: a ScaleType that is only meant for local use does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a ScaleType.TypeMap')

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the type being abstracted over is expected to be hashable.

        This is used to prevent unhashable types from being used as keys in dicts or members in sets."""
        return self._is_hashable

    def is_zero_size(self) -> bool:
        """ Whether every value of this type encodes to no bytes at all, like `None` or a record of `None`s.

        Sequences and maps of such elements cannot bound their length by the input left, they use a fixed cap instead.
        """
        return False

    @final
    def check_value(self, value: T, /) -> None:
        """ Raises a TypeError if the value's type is not compatible, or a ValueError if it is out of range.

        A value being compatible is more than just having the correct instance, for example if the value is a dict, all
        the dict's keys and values must be checked for compatibility.
        """
        # XXX: subclasses must implement ScaleType._check_value, not ScaleType.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, encoder: ScaleEncoder, value: T, /) -> None:
        """ Serialize a value instance according to the signature that was abstracted.

        Serialization includes calling check_value while the value is being serialized, so calling check_value before
        calling serialize is not needed.
        """
        # XXX: subclasses must implement ScaleType._serialize, not ScaleType.serialize
        self._check_value(value, deep=False)
        self._serialize(encoder, value)

    @final
    def deserialize(self, decoder: ScaleDecoder, /) -> T:
        """ Deserialize a value instance according to the signature that was abstracted.

        Decoding either produces a valid value or raises a `SerializationError`, there is no partially decoded result.
        """
        # XXX: subclasses must implement ScaleType._deserialize, not ScaleType.deserialize
        return self._deserialize(decoder)

    @final
    def to_bytes(self, value: T, /, *, max_bytes: Optional[int] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.
        """
        from scale_codec.encoder import ScaleEncoder
        encoder = ScaleEncoder.build(max_bytes=max_bytes, max_depth=max_depth)
        try:
            self.serialize(encoder, value)
        except RecursionError as e:
            raise DepthLimitExceededError('value is nested beyond the interpreter recursion limit') from e
        return encoder.to_bytes()

    @final
    def from_bytes(
        self,
        data: bytes,
        /,
        *,
        max_collection_length: Optional[int] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> T:
        """ Shortcut to quickly parse a value T from `bytes` and avoid using the serialization system.

        The whole input must be consumed, trailing bytes raise `TrailingBytesError`.
        """
        from scale_codec.decoder import ScaleDecoder
        decoder = ScaleDecoder.build(data, max_collection_length=max_collection_length, max_depth=max_depth)
        try:
            value = self.deserialize(decoder)
        except RecursionError as e:
            raise DepthLimitExceededError('input is nested beyond the interpreter recursion limit',
                                          position=decoder.cur_pos()) from e
        decoder.finalize()
        return value

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `ScaleType.check_value`.

        Compound values should use `ScaleType._check_value` on the inner type(s) instead of `ScaleType.check_value` and
        pass the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, encoder: ScaleEncoder, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the give value has been "shallow checked".

        When implementing the serialization of compound types, `ScaleType.serialize` should be passed as the element
        encoder instead of `ScaleType._serialize`, that way each element is "shallow checked" as it is encoded.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, decoder: ScaleDecoder, /) -> T:
        """ Inner implementation of `deserialize`.
        """
        raise NotImplementedError
