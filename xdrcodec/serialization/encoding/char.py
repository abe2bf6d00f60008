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
A single character is encoded as exactly 1 byte, with no padding.

>>> se = Serializer.build_bytes_serializer()
>>> encode_char(se, 'A')
>>> encode_char(se, 'z')
>>> bytes(se.finalize()).hex()
'417a'

>>> de = Deserializer.build_bytes_deserializer(b'Az')
>>> decode_char(de)
'A'
>>> decode_char(de)
'z'
>>> de.finalize()
"""

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.exceptions import TextEncodingError

DEFAULT_CHAR_ENCODING = 'latin-1'


def encode_char(serializer: Serializer, value: str, *, encoding: str = DEFAULT_CHAR_ENCODING) -> None:
    """ Encodes a 1-character string as 1 byte.
    """
    if len(value) != 1:
        raise TextEncodingError(f'expected a single character, got {len(value)}')
    try:
        data = value.encode(encoding)
    except UnicodeEncodeError as e:
        raise TextEncodingError(f'{value!r} cannot be encoded as {encoding}') from e
    if len(data) != 1:
        raise TextEncodingError(f'{value!r} does not fit in 1 byte using {encoding}')
    serializer.write_bytes(data)


def decode_char(deserializer: Deserializer, *, encoding: str = DEFAULT_CHAR_ENCODING) -> str:
    """ Decodes 1 byte as a 1-character string.
    """
    raw = bytes([deserializer.read_byte()])
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise TextEncodingError(f'{raw!r} is not a valid {encoding} character') from e
