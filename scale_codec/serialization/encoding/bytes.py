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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a compact
integer.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x10' before writing b'test'
>>> bytes(se.finalize()).hex()
'1074657374'

>>> se = Serializer.build_bytes_serializer()
>>> raw_data = b'test' * 32
>>> len(raw_data)
128
>>> encode_bytes(se, raw_data)  # prepends b'\x01\x02' before raw_data
>>> encoded_data = bytes(se.finalize())
>>> len(encoded_data)
130
>>> encoded_data[:10].hex()
'01027465737474657374'

>>> de = Deserializer.build_bytes_deserializer(encoded_data)  # that we encoded before
>>> decoded_data = decode_bytes(de)
>>> de.finalize()  # called to assert we've consumed everything
>>> decoded_data == raw_data
True
>>> decoded_data[:8]
b'testtest'

>>> de = Deserializer.build_bytes_deserializer(b'\x10test')
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x10testfoo')
>>> _ = decode_bytes(de)
>>> try:
...     de.finalize()
... except TrailingBytesError as e:
...     print(*e.args)
3 trailing bytes (at byte 5)

>>> de = Deserializer.build_bytes_deserializer(b'\x10tes')
>>> try:
...     decode_bytes(de)
... except UnexpectedEndError as e:
...     print(*e.args)
needed 4 bytes, 3 left (at byte 1)
"""

from typing import Optional

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.exceptions import CollectionTooLargeError

from .compact import decode_compact, encode_compact


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray, memoryview))
    encode_compact(serializer, len(data))
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer, *, max_length: Optional[int] = None) -> bytes:
    """ Decodes a byte-sequnce with a length prefix.

    This modules's docstring has more details and examples.
    """
    pos = deserializer.cur_pos()
    size = decode_compact(deserializer)
    if max_length is not None and size > max_length:
        raise CollectionTooLargeError(f'{size} bytes is above the maximum of {max_length}', position=pos)
    return bytes(deserializer.read_bytes(size))
