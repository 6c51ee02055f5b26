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
This module implements the single-byte encoding of an optional boolean.

SCALE does not encode `Option<bool>` as an option tag followed by a boolean, it packs both in one byte:

- `None` maps to `b'\x00'`
- `False` maps to `b'\x01'`
- `True` maps to `b'\x02'`
- any other byte value is invalid

>>> se = Serializer.build_bytes_serializer()
>>> encode_option_bool(se, None)
>>> encode_option_bool(se, False)
>>> encode_option_bool(se, True)
>>> bytes(se.finalize()).hex()
'000102'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000102'))
>>> [decode_option_bool(de) for _ in range(3)]
[None, False, True]
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x03')
>>> try:
...     decode_option_bool(de)
... except InvalidOptionBoolError as e:
...     print(*e.args)
b'\x03' is not a valid optional boolean (at byte 0)
"""

from typing import Optional

from scale_codec.serialization import Deserializer, Serializer
from scale_codec.serialization.exceptions import InvalidOptionBoolError

_OPTION_BOOL_TO_BYTE = {None: 0x00, False: 0x01, True: 0x02}
_BYTE_TO_OPTION_BOOL = {v: k for k, v in _OPTION_BOOL_TO_BYTE.items()}


def encode_option_bool(serializer: Serializer, value: Optional[bool]) -> None:
    # 0 and 1 hash like False and True, they must not reach the lookup
    if value is not None and not isinstance(value, bool):
        raise TypeError(f'expected bool or None, not {type(value).__name__}')
    serializer.write_byte(_OPTION_BOOL_TO_BYTE[value])


def decode_option_bool(deserializer: Deserializer) -> Optional[bool]:
    pos = deserializer.cur_pos()
    i = deserializer.read_byte()
    if i not in _BYTE_TO_OPTION_BOOL:
        raw = bytes([i])
        raise InvalidOptionBoolError(f'{raw!r} is not a valid optional boolean', position=pos)
    return _BYTE_TO_OPTION_BOOL[i]
