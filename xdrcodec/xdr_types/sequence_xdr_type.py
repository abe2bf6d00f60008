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

from collections.abc import Collection, Iterable
from typing import Any, Callable, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from xdrcodec.serialization.exceptions import DomainViolationError, UnsupportedShapeError
from xdrcodec.utils.typing import is_subclass
from xdrcodec.xdr_types.utils import pretty_type
from xdrcodec.xdr_types.xdr_type import Shape, XdrType

T = TypeVar('T')


class SequenceXdrType(XdrType[Collection[T]]):
    """ Variable-length sequence of a single element type, `list[T]` or `tuple[T, ...]`.

    Decoded values are rebuilt with the annotated origin, so a `list[T]` decodes to a list and a `tuple[T, ...]` to a
    tuple. Fixed-size heterogeneous tuples (`tuple[A, B]`) are not sequences and are not supported.
    """

    __slots__ = ('_element', '_builder')

    shape = Shape.SEQUENCE

    _element: XdrType[T]
    _builder: Callable[[Iterable[T]], Collection[T]]

    def __init__(self, element: XdrType[T], builder: Callable[[Iterable[T]], Collection[T]] = list) -> None:
        self._element = element
        self._builder = builder

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: XdrType.TypeMap) -> Self:
        origin = get_origin(type_) or type_
        args = get_args(type_)
        if is_subclass(origin, tuple):
            if len(args) != 2 or args[1] is not Ellipsis:
                raise UnsupportedShapeError(f'{pretty_type(type_)}: only tuple[T, ...] is supported')
        elif is_subclass(origin, list):
            if len(args) != 1:
                raise UnsupportedShapeError(f'{pretty_type(type_)}: exactly 1 type argument is required')
        else:
            raise UnsupportedShapeError(f'{pretty_type(type_)} is not a sequence type')
        return cls(XdrType.from_type(args[0], type_map=type_map), origin)

    @property
    def element(self) -> XdrType[T]:
        return self._element

    def build(self, values: Iterable[T]) -> Collection[T]:
        return self._builder(values)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, (list, tuple)):
            raise DomainViolationError(f'expected list or tuple, got {type(value).__name__}')
        if deep:
            for element in value:
                self._element.check_value(element, deep=True)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, SequenceXdrType)
            and self._element == other._element
            and self._builder is other._builder
        )

    def __hash__(self) -> int:
        return hash((SequenceXdrType, self._element, self._builder))

    def __repr__(self) -> str:
        return f'SequenceXdrType({self._element!r}, {self._builder.__name__})'
