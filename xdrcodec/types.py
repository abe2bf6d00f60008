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
Annotations understood by `xdrcodec.xdr_types`.

Plain `int` and `float` map to the XDR `int` and `double`, the NewTypes below pick any other width:

    @dataclass
    class Header:
        version: Uint8
        length: Uint32
        offset: Int64
        ratio: Float32
        flag: Char

Discriminated unions are declared by subclassing `XdrUnion` and listing the arms with their selectors:

    class Reply(XdrUnion):
        __arms__ = (
            UnionArm('ok', 0, Uint32),
            UnionArm('missing', 1),
            UnionArm('other', None, str),  # XDR `default:`
        )

    Reply('ok', 5)
    Reply('other', 'unexpected', selector=9)
"""

from typing import Any, ClassVar, NamedTuple, NewType

from typing_extensions import Self

from xdrcodec.serialization.compound_encoding.union import DiscriminantTable
from xdrcodec.serialization.exceptions import BadUnionIndexError, DomainViolationError

Int8 = NewType('Int8', int)
Uint8 = NewType('Uint8', int)
Int16 = NewType('Int16', int)
Uint16 = NewType('Uint16', int)
Int32 = NewType('Int32', int)
Uint32 = NewType('Uint32', int)
Int64 = NewType('Int64', int)
Uint64 = NewType('Uint64', int)

Float32 = NewType('Float32', float)
Float64 = NewType('Float64', float)

Char = NewType('Char', str)


class UnionArm(NamedTuple):
    """One arm of an `XdrUnion`, `selector=None` makes it the default arm and `payload=None` makes it void."""
    name: str
    selector: int | None
    payload: Any = None


class XdrUnion:
    """Base class for discriminated unions, a value holds one arm name, its payload and the wire selector."""

    __slots__ = ('arm', 'payload', 'selector')

    # XXX: subclasses must define this
    __arms__: ClassVar[tuple[UnionArm, ...]]

    # XXX: built from __arms__ when the subclass is created
    __discriminant_table__: ClassVar[DiscriminantTable]
    _arm_index: ClassVar[dict[str, int]]

    arm: str
    payload: Any
    selector: int

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        arms = cls.__dict__.get('__arms__')
        if arms is None:
            # inherits the arms of the parent, if any
            return
        arms = tuple(UnionArm(*arm) for arm in arms)
        arm_index: dict[str, int] = {}
        for index, arm in enumerate(arms):
            if arm.name in arm_index:
                raise BadUnionIndexError(f'{cls.__name__} declares arm {arm.name!r} twice')
            arm_index[arm.name] = index
        cls.__arms__ = arms
        cls.__discriminant_table__ = DiscriminantTable(arm.selector for arm in arms)
        cls._arm_index = arm_index

    def __init__(self, arm: str, payload: Any = None, *, selector: int | None = None) -> None:
        cls = type(self)
        if not hasattr(cls, '__discriminant_table__'):
            raise TypeError(f'{cls.__name__} does not declare __arms__')
        try:
            index = cls._arm_index[arm]
        except KeyError:
            raise BadUnionIndexError(f'{cls.__name__} has no arm {arm!r}')
        declared = cls.__arms__[index]
        if declared.payload is None and payload is not None:
            raise DomainViolationError(f'arm {arm!r} of {cls.__name__} has no payload')
        if declared.selector is not None and selector is not None and selector != declared.selector:
            raise BadUnionIndexError(f'arm {arm!r} of {cls.__name__} has selector {declared.selector}, not {selector}')
        self.arm = arm
        self.payload = payload
        self.selector = cls.__discriminant_table__.selector_for(index, selector)

    @classmethod
    def from_index(cls, index: int, payload: Any, *, selector: int) -> Self:
        """Build a value from the local arm index, as produced by `DiscriminantTable.resolve`."""
        return cls(cls.__arms__[index].name, payload, selector=selector)

    @property
    def index(self) -> int:
        return self._arm_index[self.arm]

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.arm, self.payload, self.selector) == (other.arm, other.payload, other.selector)

    def __hash__(self) -> int:
        return hash((type(self), self.arm, self.payload, self.selector))

    def __repr__(self) -> str:
        if self.__arms__[self.index].payload is None:
            return f'{type(self).__name__}({self.arm!r}, selector={self.selector})'
        return f'{type(self).__name__}({self.arm!r}, {self.payload!r}, selector={self.selector})'
