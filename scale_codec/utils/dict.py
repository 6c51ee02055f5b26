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


from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(base: dict[K, Any], override: dict[K, Any]) -> dict[K, Any]:
    """
    Recursively merge `override` on top of `base` and return the result as a new dict, both inputs are left intact.

    Nested dicts are merged key by key, any other value in `override` replaces the one in `base`.

    >>> base = dict(MAX_OUTPUT_BYTES=1024, nested=dict(a=1, b=2))
    >>> override = dict(nested=dict(b=3), ALLOW_TRAILING_BYTES=True)
    >>> deep_merge(base, override) == dict(MAX_OUTPUT_BYTES=1024, nested=dict(a=1, b=3), ALLOW_TRAILING_BYTES=True)
    True
    >>> base == dict(MAX_OUTPUT_BYTES=1024, nested=dict(a=1, b=2))
    True
    """
    merged = deepcopy(base)
    _merge_into(merged, override)
    return merged


def _merge_into(target: dict[K, Any], override: dict[K, Any]) -> None:
    for key, value in override.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _merge_into(target[key], value)
        else:
            target[key] = deepcopy(value)
