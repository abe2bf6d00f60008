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


from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any, TypeVar

from typing_extensions import Self, override

from xdrcodec.serialization.exceptions import DomainViolationError, UnknownVariantError, UnsupportedShapeError
from xdrcodec.utils.typing import is_subclass
from xdrcodec.xdr_types.sized_int_xdr_type import Int32XdrType
from xdrcodec.xdr_types.xdr_type import Shape, XdrType

E = TypeVar('E', bound=IntEnum)


class EnumXdrType(XdrType[E]):
    """ `IntEnum` subclasses, a member is encoded as its value in a signed 32-bit integer.
    """

    __slots__ = ('_class', '_variants')

    shape = Shape.ENUM

    _class: type[E]
    _variants: Mapping[int, E]

    def __init__(self, class_: type[E]) -> None:
        self._class = class_
        self._variants = MappingProxyType({member.value: member for member in class_})

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: XdrType.TypeMap) -> Self:
        if not (isinstance(type_, type) and is_subclass(type_, IntEnum)):
            raise UnsupportedShapeError('expected an IntEnum subclass')
        for member in type_:
            if not Int32XdrType.lower_bound() <= member.value <= Int32XdrType.upper_bound():
                raise UnsupportedShapeError(f'{member!r} does not fit in a signed 32-bit ordinal')
        return cls(type_)

    @property
    def variants(self) -> Mapping[int, E]:
        """Read-only mapping from ordinal to member."""
        return self._variants

    def ordinal_of(self, member: E) -> int:
        return int(member.value)

    def member_of(self, ordinal: int) -> E:
        try:
            return self._variants[ordinal]
        except KeyError:
            raise UnknownVariantError(f'unknown enum ordinal {ordinal}')

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise DomainViolationError(f'expected {self._class.__name__} member, got {value!r}')

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, EnumXdrType) and self._class is other._class

    def __hash__(self) -> int:
        return hash((EnumXdrType, self._class))

    def __repr__(self) -> str:
        return f'EnumXdrType({self._class.__name__})'
