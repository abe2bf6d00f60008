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


"""
Dataclasses are XDR structs: each field is encoded in declaration order with no framing around them.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from xdrcodec.serialization.exceptions import DomainViolationError, UnsupportedShapeError
from xdrcodec.xdr_types.xdr_type import Shape, XdrType

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


class StructXdrType(XdrType[D]):
    __slots__ = ('_fields', '_class')

    shape = Shape.STRUCT

    _fields: dict[str, XdrType[Any]]
    _class: type[D]

    def __init__(self, fields_: dict[str, XdrType[Any]], class_: type[D]) -> None:
        self._fields = fields_
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: XdrType.TypeMap) -> Self:
        if not (isinstance(type_, type) and is_dataclass(type_)):
            raise UnsupportedShapeError('expected a dataclass')
        try:
            # XXX: resolves annotations written as strings, `from __future__ import annotations` is common
            hints = get_type_hints(type_)
        except NameError as e:
            raise UnsupportedShapeError(f'cannot resolve the annotations of {type_.__name__}: {e}') from e
        # XXX: the order is important, `fields()` follows the declaration order and `dict` keeps it
        values: dict[str, XdrType[Any]] = {}
        for field in fields(type_):
            if not field.init:
                raise UnsupportedShapeError(f'{type_.__name__}.{field.name} must be an __init__ argument')
            values[field.name] = XdrType.from_type(hints[field.name], type_map=type_map)
        if not values:
            # XXX: every struct takes at least one byte on the wire, sequence decoding relies on it
            raise UnsupportedShapeError(f'{type_.__name__} has no fields, empty structs are not supported')
        return cls(values, type_)

    @property
    def field_count(self) -> int:
        return len(self._fields)

    def iter_fields(self) -> Iterator[tuple[str, XdrType[Any]]]:
        """Yields `(name, xdr_type)` for each field, in declaration order."""
        yield from self._fields.items()

    def build(self, values: Sequence[Any]) -> D:
        """Instantiate the dataclass from field values given in declaration order."""
        assert len(values) == len(self._fields)
        return self._class(**dict(zip(self._fields, values)))

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise DomainViolationError(f'expected {self._class.__name__} instance, got {type(value).__name__}')
        if deep:
            for field_name, field_xdr_type in self._fields.items():
                field_xdr_type.check_value(getattr(value, field_name), deep=True)

    def __repr__(self) -> str:
        fields_repr = ', '.join(f'{name}={xdr_type!r}' for name, xdr_type in self._fields.items())
        return f'StructXdrType({self._class.__name__}, {fields_repr})'
