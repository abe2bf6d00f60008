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

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, ClassVar, Generic, NamedTuple, TypeVar, final

from typing_extensions import Self

from xdrcodec.serialization.exceptions import UnsupportedShapeError
from xdrcodec.xdr_types.utils import TypeAliasMap, TypeToXdrTypeMap, get_aliased_type, get_usable_origin_type

T = TypeVar('T')


class Shape(Enum):
    """What the engine does with a value, `XdrEncoder.write_value` and `XdrDecoder.read_value` switch on this."""
    PRIMITIVE = auto()
    TEXT = auto()
    SEQUENCE = auto()
    STRUCT = auto()
    ENUM = auto()
    UNION = auto()
    # valid XDR, but not implemented, (de)serializing any of these fails with UnsupportedShapeError
    OPTION = auto()
    OPAQUE = auto()
    MAP = auto()


class PrimitiveKind(Enum):
    INTEGER = auto()
    FLOAT = auto()
    BOOL = auto()
    CHAR = auto()


class XdrType(ABC, Generic[T]):
    """ Describes how values of a Python type are laid out in XDR.

    An `XdrType` does not (de)serialize anything by itself, it is the description the engine (`XdrEncoder` and
    `XdrDecoder`) walks. Each subclass fixes its `shape` and exposes what the engine needs for that shape: width and
    signedness for primitives, the element for sequences, the fields for structs, the variants for enums and the arms
    for unions.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        xdr_types_map: TypeToXdrTypeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must define this
    shape: ClassVar[Shape]

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> XdrType[Any]:
        """ Instantiate an XdrType from a type annotation using the given maps.

        Types that no class in `type_map` can describe raise `UnsupportedShapeError`.
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        xdr_type_class = type_map.xdr_types_map[usable_origin]
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        return xdr_type_class._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Self:
        """ Instantiate this class from a type annotation.

        Compound classes use `XdrType.from_type` on their type arguments, forwarding `type_map`.
        """
        # XXX: an XdrType that is only meant for local use does not need to implement _from_type
        raise UnsupportedShapeError(f'{cls.__name__} is not compatible with use in an XdrType.TypeMap')

    @final
    def check_value(self, value: T, /, *, deep: bool = True) -> None:
        """ Raise a `DomainViolationError` if `value` cannot be encoded with this type.

        With `deep=False` compound values only have their outer type checked, the engine checks each inner value as it
        reaches it.
        """
        # XXX: subclasses must implement XdrType._check_value, not XdrType.check_value
        self._check_value(value, deep=deep)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        raise NotImplementedError

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut that encodes `value` with a fresh `XdrEncoder` using the global settings, errors are raised.
        """
        from xdrcodec.encoder import XdrEncoder
        from xdrcodec.serialization import Serializer
        serializer = Serializer.build_bytes_serializer()
        XdrEncoder(serializer).write_value(self, value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: bytes, /) -> T:
        """ Shortcut that decodes all of `data` with a fresh `XdrDecoder`, trailing bytes are an error.
        """
        from xdrcodec.decoder import XdrDecoder
        from xdrcodec.serialization import Deserializer
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = XdrDecoder(deserializer).read_value(self)
        deserializer.finalize()
        return value

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'
