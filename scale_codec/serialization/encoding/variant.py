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


r"""
This module implements the index byte that prefixes every variant of a tagged union.

The index is 0-based and always takes exactly one byte, which caps a variant type at 256 variants.

>>> se = Serializer.build_bytes_serializer()
>>> encode_variant_index(se, 0, variant_count=2)
>>> encode_variant_index(se, 255, variant_count=256)
>>> bytes(se.finalize()).hex()
'00ff'

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_variant_index(se, 0, variant_count=257)
... except VariantIndexOutOfRangeError as e:
...     print(*e.args)
a variant type is limited to 256 variants, got 257

>>> de = Deserializer.build_bytes_deserializer(b'\x02')
>>> try:
...     decode_variant_index(de, variant_count=2)
... except VariantIndexOutOfRangeError as e:
...     print(*e.args)
variant index 2 is out of range for 2 variants (at byte 0)
"""

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.exceptions import VariantIndexOutOfRangeError

MAX_VARIANTS = 256


def check_variant_count(variant_count: int) -> None:
    """ Raises `VariantIndexOutOfRangeError` when a variant type cannot be represented.
    """
    if variant_count > MAX_VARIANTS:
        raise VariantIndexOutOfRangeError(f'a variant type is limited to {MAX_VARIANTS} variants, got {variant_count}')


def encode_variant_index(serializer: Serializer, index: int, *, variant_count: int = MAX_VARIANTS) -> None:
    check_variant_count(variant_count)
    if not 0 <= index < variant_count:
        raise VariantIndexOutOfRangeError(f'variant index {index} is out of range for {variant_count} variants')
    serializer.write_byte(index)


def decode_variant_index(deserializer: Deserializer, *, variant_count: int = MAX_VARIANTS) -> int:
    check_variant_count(variant_count)
    pos = deserializer.cur_pos()
    index = deserializer.read_byte()
    if index >= variant_count:
        raise VariantIndexOutOfRangeError(f'variant index {index} is out of range for {variant_count} variants',
                                          position=pos)
    return index
