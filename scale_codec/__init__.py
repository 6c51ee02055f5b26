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
SCALE (Simple Concatenated Aggregate Little-Endian) codec.

Values are described with regular Python annotations, using the types in `scale_codec.primitives` where SCALE needs
more information than Python carries (integer widths, compact integers, characters, fixed-size byte arrays).
"""

from scale_codec.api import decode, decode_prefix, encode
from scale_codec.conf import ScaleSettings, get_global_settings
from scale_codec.decoder import ScaleDecoder
from scale_codec.encoder import ScaleEncoder
from scale_codec.primitives import H160, H256, H512, I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, Char, Compact
from scale_codec.serialization.exceptions import (
    CollectionTooLargeError,
    CustomError,
    DepthLimitExceededError,
    InvalidBoolError,
    InvalidCharacterError,
    InvalidCompactIntError,
    InvalidOptionBoolError,
    InvalidOptionError,
    OutputLimitExceededError,
    SerializationError,
    TrailingBytesError,
    UnexpectedEndError,
    UnsupportedTypeError,
    VariantIndexOutOfRangeError,
)
from scale_codec.types import ScaleType, make_scale_type
from scale_codec.version import __version__

__all__ = [
    '__version__',
    'encode',
    'decode',
    'decode_prefix',
    'make_scale_type',
    'get_global_settings',
    'ScaleDecoder',
    'ScaleEncoder',
    'ScaleSettings',
    'ScaleType',
    # primitives
    'U8',
    'U16',
    'U32',
    'U64',
    'U128',
    'I8',
    'I16',
    'I32',
    'I64',
    'I128',
    'Compact',
    'Char',
    'H160',
    'H256',
    'H512',
    # errors
    'SerializationError',
    'UnexpectedEndError',
    'InvalidBoolError',
    'InvalidOptionError',
    'InvalidOptionBoolError',
    'InvalidCompactIntError',
    'VariantIndexOutOfRangeError',
    'TrailingBytesError',
    'OutputLimitExceededError',
    'CustomError',
    'DepthLimitExceededError',
    'InvalidCharacterError',
    'CollectionTooLargeError',
    'UnsupportedTypeError',
]
