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


def deep_merge(first_dict: dict[K, Any], second_dict: dict[K, Any]) -> dict[K, Any]:
    """
    Recursively merges two dicts, returning a new one where values from `second_dict` win. Both inputs are kept intact.

    >>> base = dict(PADDING_POLICY='canonical', LIMITS=dict(text=10, sequence=20))
    >>> override = dict(LIMITS=dict(text=5), STRICT_PADDING=False)
    >>> deep_merge(base, override) == dict(PADDING_POLICY='canonical', LIMITS=dict(text=5, sequence=20),
    ...                                    STRICT_PADDING=False)
    True
    >>> base == dict(PADDING_POLICY='canonical', LIMITS=dict(text=10, sequence=20))
    True
    """
    merged = deepcopy(first_dict)

    def do_deep_merge(first: dict[K, Any], second: dict[K, Any]) -> dict[K, Any]:
        for key, value in second.items():
            if isinstance(first.get(key), dict) and isinstance(value, dict):
                do_deep_merge(first[key], value)
            else:
                first[key] = deepcopy(value)
        return first

    return do_deep_merge(merged, second_dict)
