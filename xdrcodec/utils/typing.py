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


from types import UnionType


def is_subclass(cls: type, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Like `issubclass()`, but a NewType given as arg 1 is resolved to the class it wraps first.

    >>> from typing import NewType
    >>> Port = NewType('Port', int)
    >>> is_subclass(Port, int)
    True
    >>> is_subclass(NewType('HighPort', Port), int)
    True
    >>> is_subclass(Port, str)
    False
    >>> is_subclass(bool, int | str)
    True
    """
    while (super_type := getattr(cls, '__supertype__', None)) is not None:
        cls = super_type
    return issubclass(cls, class_or_tuple)
