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


from collections import OrderedDict
from collections.abc import Sequence
from enum import IntEnum
from types import UnionType
from typing import Any

from xdrcodec.types import (
    Char,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    XdrUnion,
)
from xdrcodec.xdr_types.bool_xdr_type import BoolXdrType
from xdrcodec.xdr_types.char_xdr_type import CharXdrType
from xdrcodec.xdr_types.enum_xdr_type import EnumXdrType
from xdrcodec.xdr_types.float_xdr_type import Float32XdrType, Float64XdrType
from xdrcodec.xdr_types.primitive_xdr_type import PrimitiveXdrType
from xdrcodec.xdr_types.sequence_xdr_type import SequenceXdrType
from xdrcodec.xdr_types.sized_int_xdr_type import (
    Int8XdrType,
    Int16XdrType,
    Int32XdrType,
    Int64XdrType,
    Uint8XdrType,
    Uint16XdrType,
    Uint32XdrType,
    Uint64XdrType,
)
from xdrcodec.xdr_types.struct_xdr_type import StructXdrType
from xdrcodec.xdr_types.text_xdr_type import TextXdrType
from xdrcodec.xdr_types.union_xdr_type import UnionXdrType
from xdrcodec.xdr_types.unsupported_xdr_type import MapXdrType, OpaqueXdrType, OptionXdrType
from xdrcodec.xdr_types.utils import DATACLASS_KEY, TypeAliasMap, TypeToXdrTypeMap
from xdrcodec.xdr_types.xdr_type import PrimitiveKind, Shape, XdrType

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_XDR_TYPE_MAP',
    'BoolXdrType',
    'CharXdrType',
    'EnumXdrType',
    'Float32XdrType',
    'Float64XdrType',
    'Int8XdrType',
    'Int16XdrType',
    'Int32XdrType',
    'Int64XdrType',
    'MapXdrType',
    'OpaqueXdrType',
    'OptionXdrType',
    'PrimitiveKind',
    'PrimitiveXdrType',
    'SequenceXdrType',
    'Shape',
    'StructXdrType',
    'TextXdrType',
    'TypeAliasMap',
    'TypeToXdrTypeMap',
    'Uint8XdrType',
    'Uint16XdrType',
    'Uint32XdrType',
    'Uint64XdrType',
    'UnionXdrType',
    'XdrType',
    'make_xdr_type',
    'xdr_type_for_value',
]

DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    OrderedDict: dict,
    Sequence: list,
    bytearray: bytes,
}

DEFAULT_TYPE_TO_XDR_TYPE_MAP: TypeToXdrTypeMap = {
    # builtin types:
    bool: BoolXdrType,
    float: Float64XdrType,
    int: Int32XdrType,
    list: SequenceXdrType,
    str: TextXdrType,
    tuple: SequenceXdrType,
    # sized primitives:
    Int8: Int8XdrType,
    Uint8: Uint8XdrType,
    Int16: Int16XdrType,
    Uint16: Uint16XdrType,
    Int32: Int32XdrType,
    Uint32: Uint32XdrType,
    Int64: Int64XdrType,
    Uint64: Uint64XdrType,
    Float32: Float32XdrType,
    Float64: Float64XdrType,
    Char: CharXdrType,
    # user declared types:
    DATACLASS_KEY: StructXdrType,
    IntEnum: EnumXdrType,
    XdrUnion: UnionXdrType,
    # not implemented, these fail when (de)serialized:
    UnionType: OptionXdrType,
    bytes: OpaqueXdrType,
    dict: MapXdrType,
}

DEFAULT_TYPE_MAP = XdrType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_XDR_TYPE_MAP)


def make_xdr_type(type_: Any, /) -> XdrType[Any]:
    """ Like XdrType.from_type, but with the default maps.

    If you need to customize the mapping use `XdrType.from_type` instead.
    """
    return XdrType.from_type(type_, type_map=DEFAULT_TYPE_MAP)


def xdr_type_for_value(value: Any, /) -> XdrType[Any]:
    """ Describe a value from its class alone.

    This works for values whose class carries the whole layout (dataclasses, `IntEnum` members, `XdrUnion` values,
    `str`, `bool`, `int` and `float`), sequences need an explicit annotation because the element type is unknown.
    """
    return make_xdr_type(type(value))
