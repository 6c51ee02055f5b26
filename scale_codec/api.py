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
Top-level entry points: convert a value to SCALE bytes and back, given the value's type annotation.

>>> from scale_codec.primitives import U8
>>> encode([1, 2, 3], list[U8]).hex()
'0c010203'
>>> decode(bytes.fromhex('0c010203'), list[U8])
[1, 2, 3]
>>> decode_prefix(bytes.fromhex('0c010203ffff'), list[U8])
([1, 2, 3], 4)
"""

from typing import Any, Optional

from structlog import get_logger

from scale_codec.conf import ScaleSettings, get_global_settings
from scale_codec.decoder import ScaleDecoder
from scale_codec.encoder import ScaleEncoder
from scale_codec.serialization import DepthLimitExceededError
from scale_codec.serialization.types import Buffer
from scale_codec.types import ScaleType, make_scale_type

logger = get_logger()


def _as_scale_type(type_: Any) -> ScaleType[Any]:
    if isinstance(type_, ScaleType):
        return type_
    return make_scale_type(type_)


def _serialize(scale_type: ScaleType[Any], encoder: ScaleEncoder, value: Any) -> None:
    try:
        scale_type.serialize(encoder, value)
    except RecursionError as e:
        raise DepthLimitExceededError('value is nested beyond the interpreter recursion limit') from e


def _deserialize(scale_type: ScaleType[Any], decoder: ScaleDecoder) -> Any:
    try:
        return scale_type.deserialize(decoder)
    except RecursionError as e:
        raise DepthLimitExceededError('input is nested beyond the interpreter recursion limit',
                                      position=decoder.cur_pos()) from e


def encode(value: Any, type_: Any, /, *, settings: Optional[ScaleSettings] = None) -> bytes:
    """ Encode `value` as the SCALE encoding of `type_`, which is an annotation or an already built `ScaleType`.

    Raises `TypeError` or `ValueError` when the value doesn't fit the type, and `OutputLimitExceededError` when the
    output would be larger than `MAX_OUTPUT_BYTES`. Values nested deeper than `MAX_DEPTH` raise
    `DepthLimitExceededError`.
    """
    if settings is None:
        settings = get_global_settings()
    encoder = ScaleEncoder.build(max_bytes=settings.MAX_OUTPUT_BYTES, max_depth=settings.MAX_DEPTH)
    _serialize(_as_scale_type(type_), encoder, value)
    return encoder.to_bytes()


def decode(data: Buffer, type_: Any, /, *, settings: Optional[ScaleSettings] = None) -> Any:
    """ Decode a value of `type_` that must take the whole of `data`.

    Leftover input raises `TrailingBytesError`, unless `ALLOW_TRAILING_BYTES` is set, in which case it is ignored.
    """
    if settings is None:
        settings = get_global_settings()
    decoder = ScaleDecoder.build(
        data,
        max_collection_length=settings.MAX_COLLECTION_LENGTH,
        max_depth=settings.MAX_DEPTH,
    )
    value = _deserialize(_as_scale_type(type_), decoder)
    if settings.ALLOW_TRAILING_BYTES:
        if not decoder.is_empty():
            logger.debug('ignoring trailing bytes', trailing=decoder.remaining(), consumed=decoder.cur_pos())
    else:
        decoder.finalize()
    return value


def decode_prefix(data: Buffer, type_: Any, /, *, settings: Optional[ScaleSettings] = None) -> tuple[Any, int]:
    """ Decode a value of `type_` from the start of `data` and return it with the number of bytes it took.

    Whatever comes after the value is left untouched, this is meant for reading a value that is followed by more data.
    """
    if settings is None:
        settings = get_global_settings()
    decoder = ScaleDecoder.build(
        data,
        max_collection_length=settings.MAX_COLLECTION_LENGTH,
        max_depth=settings.MAX_DEPTH,
    )
    value = _deserialize(_as_scale_type(type_), decoder)
    return value, decoder.cur_pos()
