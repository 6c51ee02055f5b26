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


from typing import Optional


class SerializationError(ValueError):
    """ Base class for every error raised while encoding or decoding.

    It derives from `ValueError` so callers that only care about "bad data" can keep catching that.
    """

    def __init__(self, message: str = '', *, position: Optional[int] = None) -> None:
        self.position = position
        if position is not None:
            message = f'{message} (at byte {position})'
        super().__init__(message)


class UnexpectedEndError(SerializationError):
    """ The input ended before a rule's required bytes were available."""
    pass


class InvalidBoolError(SerializationError):
    """ A boolean byte was neither 0x00 nor 0x01."""
    pass


class InvalidOptionError(SerializationError):
    """ An option tag byte was neither 0x00 nor 0x01."""
    pass


class InvalidOptionBoolError(SerializationError):
    """ An `Option<bool>` byte was not one of 0x00, 0x01 or 0x02."""
    pass


class InvalidCompactIntError(SerializationError):
    """ A compact integer is malformed: its declared length runs past the input or it is not canonical."""
    pass


class VariantIndexOutOfRangeError(SerializationError):
    """ A variant index does not fit in one byte or is not a valid index of the variant type."""
    pass


class TrailingBytesError(SerializationError):
    """ A top-level decode finished but the input still had bytes left."""
    pass


class OutputLimitExceededError(SerializationError):
    """ This error is raised when the adapted serializer reached its maximum bytes write.

    After this exception is raised the adapted serializer cannot be used anymore. Handlers of this exception are
    expected to either: bubble up the exception (or an equivalent exception), or return an error. Handlers should not
    try to write again on the same serializer.
    """
    pass


class CustomError(SerializationError):
    """ A semantic error reported by a type driver, for example a string that is not valid UTF-8."""

    def __init__(self, message: str, *, position: Optional[int] = None) -> None:
        self.message = message
        super().__init__(message, position=position)


class InvalidCharacterError(SerializationError):
    """ A `char` code point is a surrogate or is above 0x10FFFF."""
    pass


class CollectionTooLargeError(SerializationError):
    """ A declared sequence, map or blob length is above the configured maximum."""
    pass


class DepthLimitExceededError(SerializationError):
    """ A value nests options, variants, sequences, maps or tuples deeper than the configured maximum."""
    pass


class UnsupportedTypeError(SerializationError, TypeError):
    """ A type annotation cannot be bound to a SCALE encoding (float, bare int, ...)."""
    pass
