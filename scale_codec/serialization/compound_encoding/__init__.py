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
This module was made to hold compound encoding implementations.

Compound encoders are encoders that are generic in some way and will delegate the encoding of some portion to another
encoder. For example a `value: Optional[T]` encoder is prepared to encode the tag and delegate the rest to an encoder
that knows how to encode `T`.

The general organization should be that each submodule `x` deals with a single type and look like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

The "config params" are optional and specific to each encoder. Submodules should not have to take into consideration
how types are mapped to encoders.

Element encoders receive the same serializer instance that was given to the compound encoder, so a richer serializer
(like `ScaleEncoder`) reaches the element encoders unchanged.
"""

from typing import Protocol, TypeVar

from scale_codec.serialization.deserializer import Deserializer
from scale_codec.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)
S_contra = TypeVar('S_contra', bound=Serializer, contravariant=True)
D_contra = TypeVar('D_contra', bound=Deserializer, contravariant=True)


class Decoder(Protocol[D_contra, T_co]):
    def __call__(self, deserializer: D_contra, /) -> T_co:
        ...


class Encoder(Protocol[S_contra, T_contra]):
    def __call__(self, serializer: S_contra, value: T_contra, /) -> None:
        ...
