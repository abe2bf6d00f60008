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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format itself is a standard big-endian two's complement format, with no padding. XDR only defines 4 and 8
byte integers, 1 and 2 byte integers are supported as well and use exactly 1 and 2 bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True)  # writes 00
>>> encode_int(se, 255, length=1, signed=False)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True)  # writes 04d2
>>> encode_int(se, -1234, length=2, signed=True)  # writes fb2e
>>> encode_int(se, 7, length=4, signed=False)  # writes 00000007
>>> encode_int(se, -2, length=8, signed=True)  # writes fffffffffffffffe
>>> bytes(se.finalize()).hex()
'00ff04d2fb2e00000007fffffffffffffffe'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d2fb2e00000007fffffffffffffffe'))
>>> decode_int(de, length=1, signed=True)  # reads 00
0
>>> decode_int(de, length=1, signed=False)  # reads ff
255
>>> decode_int(de, length=2, signed=True)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True)  # reads fb2e
-1234
>>> decode_int(de, length=4, signed=False)  # reads 00000007
7
>>> decode_int(de, length=8, signed=True)  # reads fffffffffffffffe
-2
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False)
... except ValueRangeError as e:
...     print(*e.args)
256 does not fit in 1 byte(s) (unsigned)
"""

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.exceptions import ValueRangeError


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=signed)
    except OverflowError as e:
        kind = 'signed' if signed else 'unsigned'
        raise ValueRangeError(f'{number} does not fit in {length} byte(s) ({kind})') from e
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='big', signed=signed)
