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


from typing import TypeVar

from typing_extensions import override

from scale_codec.serialization.exceptions import OutputLimitExceededError
from scale_codec.serialization.serializer import Serializer

from ..types import Buffer
from .generic_adapter import GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    """ Caps the total number of bytes that can be written through it.

    The check happens before anything reaches the inner serializer, so a write that would cross the limit writes
    nothing. The serializer must not be used after `OutputLimitExceededError` is raised.
    """

    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, write_size: int) -> None:
        self._bytes_left -= write_size
        if self._bytes_left < 0:
            raise OutputLimitExceededError(f'output is limited to {self._max_bytes} bytes')

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(len(data_view))
        super().write_bytes(data_view)
