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
Shapes that exist in XDR but are not implemented: optional data (`T | None`), opaque byte strings (`bytes`) and maps
(`dict[K, V]`, not XDR proper but commonly layered on top of it).

They can be described so that a type containing them maps without surprises, but `XdrEncoder` and `XdrDecoder` fail
with `UnsupportedShapeError` as soon as they reach one.
"""

from types import NoneType
from typing import Any, get_args

from typing_extensions import Self, override

from xdrcodec.serialization.exceptions import UnsupportedShapeError
from xdrcodec.xdr_types.utils import pretty_type
from xdrcodec.xdr_types.xdr_type import Shape, XdrType


class _UnsupportedXdrType(XdrType[Any]):
    __slots__ = ('_type',)

    _type: Any

    def __init__(self, type_: Any) -> None:
        self._type = type_

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: XdrType.TypeMap) -> Self:
        return cls(type_)

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        # XXX: nothing to check, (de)serializing is rejected by the engine regardless of the value
        pass

    def __repr__(self) -> str:
        return f'{type(self).__name__}({pretty_type(self._type)})'


class OptionXdrType(_UnsupportedXdrType):
    shape = Shape.OPTION

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: XdrType.TypeMap) -> Self:
        if NoneType not in get_args(type_):
            raise UnsupportedShapeError(f'{pretty_type(type_)}: unions of Python types are not supported, '
                                        'declare an XdrUnion subclass instead')
        return cls(type_)


class OpaqueXdrType(_UnsupportedXdrType):
    shape = Shape.OPAQUE


class MapXdrType(_UnsupportedXdrType):
    shape = Shape.MAP
