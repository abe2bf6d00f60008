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
This module implements IEEE-754 floating point numbers in big-endian, `length=4` is a single precision XDR `float` and
`length=8` is a double precision XDR `double`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4)  # writes 3fc00000
>>> encode_float(se, -2.0, length=8)  # writes c000000000000000
>>> bytes(se.finalize()).hex()
'3fc00000c000000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3fc00000c000000000000000'))
>>> decode_float(de, length=4)
1.5
>>> decode_float(de, length=8)
-2.0
>>> de.finalize()
"""

import struct

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.exceptions import ValueRangeError

_FORMATS = {
    4: '>f',
    8: '>d',
}


def _get_format(length: int) -> str:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'floats must have 4 or 8 bytes, not {length}')


def encode_float(serializer: Serializer, value: float, *, length: int) -> None:
    """ Encode a float with single (length=4) or double (length=8) precision.
    """
    fmt = _get_format(length)
    try:
        serializer.write_packed(fmt, value)
    except (OverflowError, struct.error) as e:
        raise ValueRangeError(f'{value!r} does not fit in a {length}-byte float') from e


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decode a float with single (length=4) or double (length=8) precision.
    """
    value, = deserializer.read_packed(_get_format(length))
    return value
