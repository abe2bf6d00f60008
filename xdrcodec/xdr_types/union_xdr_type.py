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

from typing import Any, TypeVar

from typing_extensions import Self, override

from xdrcodec.serialization.compound_encoding.union import DiscriminantTable
from xdrcodec.serialization.exceptions import DomainViolationError, UnsupportedShapeError
from xdrcodec.types import XdrUnion
from xdrcodec.utils.typing import is_subclass
from xdrcodec.xdr_types.xdr_type import Shape, XdrType

U = TypeVar('U', bound=XdrUnion)


class UnionXdrType(XdrType[U]):
    """ `XdrUnion` subclasses, see `xdrcodec.types.XdrUnion` for how arms are declared.

    `arms` follows the declaration order, so the local index returned by `table.resolve()` also indexes `arms`. Arms
    with no payload are `None`.
    """

    __slots__ = ('_class', '_arms')

    shape = Shape.UNION

    _class: type[U]
    _arms: tuple[XdrType[Any] | None, ...]

    def __init__(self, class_: type[U], arms: tuple[XdrType[Any] | None, ...]) -> None:
        assert len(arms) == len(class_.__discriminant_table__)
        self._class = class_
        self._arms = arms

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: XdrType.TypeMap) -> Self:
        if not (isinstance(type_, type) and is_subclass(type_, XdrUnion)):
            raise UnsupportedShapeError('expected an XdrUnion subclass')
        if not hasattr(type_, '__discriminant_table__'):
            raise UnsupportedShapeError(f'{type_.__name__} does not declare __arms__')
        arms = tuple(
            None if arm.payload is None else XdrType.from_type(arm.payload, type_map=type_map)
            for arm in type_.__arms__
        )
        return cls(type_, arms)

    @property
    def table(self) -> DiscriminantTable:
        return self._class.__discriminant_table__

    @property
    def arms(self) -> tuple[XdrType[Any] | None, ...]:
        return self._arms

    def arm_of(self, value: U) -> tuple[int, int, Any]:
        """Returns `(index, selector, payload)` of a union value."""
        return value.index, value.selector, value.payload

    def build(self, index: int, selector: int, payload: Any) -> U:
        return self._class.from_index(index, payload, selector=selector)

    @override
    def _check_value(self, value: U, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise DomainViolationError(f'expected {self._class.__name__} instance, got {type(value).__name__}')
        if deep:
            arm_xdr_type = self._arms[value.index]
            if arm_xdr_type is not None:
                arm_xdr_type.check_value(value.payload, deep=True)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, UnionXdrType) and self._class is other._class

    def __hash__(self) -> int:
        return hash((UnionXdrType, self._class))

    def __repr__(self) -> str:
        return f'UnionXdrType({self._class.__name__})'
