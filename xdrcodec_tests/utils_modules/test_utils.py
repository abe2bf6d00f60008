#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
from enum import IntEnum
from typing import NewType

import pytest

from xdrcodec.utils.dict import deep_merge
from xdrcodec.utils.typing import is_subclass


def test_deep_merge_does_not_mutate():
    first = dict(a=dict(b=[1, 2]))
    second = dict(a=dict(c=3))
    merged = deep_merge(first, second)

    assert merged == dict(a=dict(b=[1, 2], c=3))
    merged['a']['b'].append(3)
    assert first == dict(a=dict(b=[1, 2]))


def test_deep_merge_replaces_non_dicts():
    assert deep_merge(dict(a=dict(b=1)), dict(a=2)) == dict(a=2)
    assert deep_merge(dict(a=2), dict(a=dict(b=1))) == dict(a=dict(b=1))


class Color(IntEnum):
    RED = 0


@pytest.mark.parametrize(
    ['cls', 'parent', 'expected'],
    [
        (Color, IntEnum, True),
        (Color, int, True),
        (NewType('Id', int), int, True),
        (NewType('Name', str), int, False),
        (bool, (str, int), True),
    ]
)
def test_is_subclass(cls, parent, expected):
    assert is_subclass(cls, parent) is expected
