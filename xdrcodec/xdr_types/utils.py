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


from collections.abc import Hashable, Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum, IntEnum
from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, TypeAlias, Union, get_args, get_origin

from structlog import get_logger

from xdrcodec.serialization.exceptions import UnsupportedShapeError

if TYPE_CHECKING:
    from xdrcodec.xdr_types.xdr_type import XdrType


logger = get_logger()

TypeAliasMap: TypeAlias = Mapping[Any, type]
TypeToXdrTypeMap: TypeAlias = Mapping[Hashable, type['XdrType']]

# XXX: the `dataclass` decorator itself is used as the key that stands for "any dataclass" in a TypeToXdrTypeMap
DATACLASS_KEY = dataclass


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(list[int])
    'list[int]'
    >>> pretty_type(None)
    'None'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias, type arguments included.

    >>> from collections import OrderedDict
    >>> from collections.abc import Sequence
    >>> alias_map = {Sequence: list, OrderedDict: dict}
    >>> get_aliased_type(Sequence[OrderedDict[str, int]], alias_map, _verbose=False)
    list[dict[str, int]]
    >>> get_aliased_type(int, alias_map, _verbose=False)
    <class 'int'>
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    replaced = False

    # XXX: special case, typing.Union (and so typing.Optional) becomes types.UnionType
    if origin_type is Union:
        origin_type = UnionType
    elif isinstance(origin_type, Hashable) and origin_type in alias_map:
        origin_type = alias_map[origin_type]
        replaced = True

    type_args = get_args(type_)
    if not type_args:
        return origin_type, replaced

    aliased_args = []
    for arg in type_args:
        if arg is Ellipsis:
            aliased_args.append(arg)
            continue
        aliased_arg, arg_replaced = _get_aliased_type(arg, alias_map)
        aliased_args.append(aliased_arg)
        replaced |= arg_replaced

    # XXX: special case, UnionType can't be subscripted, the union has to be rebuilt with `|`
    if origin_type is UnionType:
        return reduce(or_, aliased_args), replaced

    return origin_type[tuple(aliased_args)], replaced


def get_usable_origin_type(type_: Any, /, *, type_map: 'XdrType.TypeMap') -> Hashable:
    """ Map a type annotation to the key of `type_map.xdr_types_map` that describes it.

    Exact matches win, then dataclasses (under `DATACLASS_KEY`), then the closest base class in the map, which is how
    `IntEnum` and `XdrUnion` subclasses are found.

    >>> from enum import IntEnum
    >>> from xdrcodec.xdr_types import DEFAULT_TYPE_MAP
    >>> get_usable_origin_type(list[int], type_map=DEFAULT_TYPE_MAP)
    <class 'list'>
    >>> class Color(IntEnum):
    ...     RED = 0
    >>> get_usable_origin_type(Color, type_map=DEFAULT_TYPE_MAP)
    <enum 'IntEnum'>
    >>> try:
    ...     get_usable_origin_type(complex, type_map=DEFAULT_TYPE_MAP)
    ... except UnsupportedShapeError as e:
    ...     print(*e.args)
    type complex is not supported by any XdrType class
    """
    if isinstance(type_, str):
        raise UnsupportedShapeError(f'string annotations are not supported: {type_!r}')

    xdr_types_map = type_map.xdr_types_map
    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=False)
    origin = get_origin(aliased_type) or aliased_type

    if isinstance(origin, Hashable) and origin in xdr_types_map:
        return origin

    if isinstance(origin, type):
        if is_dataclass(origin) and DATACLASS_KEY in xdr_types_map:
            return DATACLASS_KEY
        if issubclass(origin, Enum) and not issubclass(origin, IntEnum):
            # XXX: mixed-in enums like `class X(int, Enum)` would otherwise resolve to `int` and lose their members
            raise UnsupportedShapeError(f'enum {origin.__name__} must derive from IntEnum')
        for base in origin.__mro__[1:]:
            if base is not object and base in xdr_types_map:
                return base

    raise UnsupportedShapeError(f'type {pretty_type(type_)} is not supported by any XdrType class')
