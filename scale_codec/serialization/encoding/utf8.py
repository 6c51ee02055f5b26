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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 18666f6f626172
>>> encode_utf8(se, 'π')  # writes 08cf80
>>> encode_utf8(se, '😎')  # writes 10f09f988e
>>> bytes(se.finalize()).hex()
'18666f6f62617208cf8010f09f988e'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('18666f6f62617208cf8010f09f988e'))
>>> decode_utf8(de)  # reads 18666f6f626172
'foobar'
>>> decode_utf8(de)  # reads 08cf80
'π'
>>> decode_utf8(de)  # reads 10f09f988e
'😎'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x04\xff')
>>> try:
...     decode_utf8(de)
... except CustomError as e:
...     print(e.message)
invalid utf-8 string
"""

from typing import Optional

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.exceptions import CustomError

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = value.encode('utf-8')
    encode_bytes(serializer, data)


def decode_utf8(deserializer: Deserializer, *, max_length: Optional[int] = None) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    pos = deserializer.cur_pos()
    data = decode_bytes(deserializer, max_length=max_length)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise CustomError('invalid utf-8 string', position=pos) from e
