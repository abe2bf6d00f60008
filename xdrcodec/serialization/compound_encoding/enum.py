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


r"""
An enum is encoded as its member's declared value (not its position) in a signed 32-bit integer.

>>> from enum import IntEnum
>>> class Color(IntEnum):
...     RED = 1
...     BLUE = 5
>>> se = Serializer.build_bytes_serializer()
>>> encode_enum(se, Color.BLUE)
>>> bytes(se.finalize()).hex()
'00000005'

>>> variants = {member.value: member for member in Color}
>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000005'))
>>> decode_enum(de, variants)
<Color.BLUE: 5>

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000002'))
>>> try:
...     decode_enum(de, variants)
... except UnknownVariantError as e:
...     print(*e.args)
unknown enum ordinal 2
"""

from collections.abc import Mapping
from typing import TypeVar

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.encoding.int import decode_int, encode_int
from xdrcodec.serialization.exceptions import UnknownVariantError

T = TypeVar('T')


def encode_enum(serializer: Serializer, ordinal: int) -> None:
    encode_int(serializer, int(ordinal), length=4, signed=True)


def decode_enum(deserializer: Deserializer, variants: Mapping[int, T]) -> T:
    """ Read a signed 32-bit ordinal and look it up in `variants`, unknown ordinals are rejected.
    """
    ordinal = decode_int(deserializer, length=4, signed=True)
    try:
        return variants[ordinal]
    except KeyError:
        raise UnknownVariantError(f'unknown enum ordinal {ordinal}')
