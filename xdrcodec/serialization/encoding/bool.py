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
Booleans travel as a single unsigned byte, `0` is false and `1` is true. Every other byte is rejected when decoding so
that a value always has exactly one wire form.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, True)
>>> encode_bool(se, False)
>>> bytes(se.finalize())
b'\x01\x00'

>>> de = Deserializer.build_bytes_deserializer(b'\x00\x01rest')
>>> decode_bool(de), decode_bool(de)
(False, True)
>>> bytes(de.read_all())
b'rest'

>>> try:
...     decode_bool(Deserializer.build_bytes_deserializer(b'\x07'))
... except InvalidBoolError as e:
...     print(*e.args)
boolean byte must be 0 or 1, got 0x07
"""

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.encoding.int import decode_int, encode_int
from xdrcodec.serialization.exceptions import InvalidBoolError


def encode_bool(serializer: Serializer, value: bool) -> None:
    assert isinstance(value, bool)
    encode_int(serializer, int(value), length=1, signed=False)


def decode_bool(deserializer: Deserializer) -> bool:
    raw = decode_int(deserializer, length=1, signed=False)
    if raw > 1:
        raise InvalidBoolError(f'boolean byte must be 0 or 1, got {raw:#04x}')
    return raw == 1
