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


from pathlib import Path
from typing import Optional, Union

from pydantic import NonNegativeInt

from scale_codec.utils.pydantic import BaseModel

DEFAULT_MAX_DEPTH: int = 64


class ScaleSettings(BaseModel):
    """ Knobs that bound or relax the top-level encode and decode calls.

    The wire format itself is not configurable, these settings only decide when a call gives up.
    """

    # Encoding fails with OutputLimitExceededError once the output would grow beyond this many bytes.
    MAX_OUTPUT_BYTES: Optional[NonNegativeInt] = None

    # When set, `decode` ignores input left after the value instead of raising TrailingBytesError.
    ALLOW_TRAILING_BYTES: bool = False

    # Sequences, maps, strings and byte strings that declare more elements than this are rejected on decode with
    # CollectionTooLargeError before any element is read.
    MAX_COLLECTION_LENGTH: Optional[NonNegativeInt] = None

    # Options, variants, sequences, maps, arrays and tuples nested deeper than this fail with DepthLimitExceededError,
    # on both encode and decode.
    MAX_DEPTH: NonNegativeInt = DEFAULT_MAX_DEPTH

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'ScaleSettings':
        """Takes a filepath to a yaml file and returns a validated ScaleSettings instance."""
        from scale_codec.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath)
