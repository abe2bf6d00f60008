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
Text is encoded as an unsigned 32-bit byte length, followed by the encoded bytes and by zero padding that aligns the
whole field to 4 bytes (see the `padding` module for the two supported rules).

The default encoding is latin-1, which maps every character to exactly one byte. Any Python codec can be used, the
length prefix always counts bytes and never characters.

>>> se = Serializer.build_bytes_serializer()
>>> encode_text(se, 'abc')  # writes 00000003 616263 00
>>> bytes(se.finalize()).hex()
'0000000361626300'

>>> se = Serializer.build_bytes_serializer()
>>> encode_text(se, 'test')  # writes 00000004 74657374
>>> bytes(se.finalize()).hex()
'0000000474657374'

>>> se = Serializer.build_bytes_serializer()
>>> encode_text(se, 'test', padding=PaddingPolicy.LEGACY)  # writes 00000004 74657374 00000000
>>> bytes(se.finalize()).hex()
'000000047465737400000000'

>>> se = Serializer.build_bytes_serializer()
>>> encode_text(se, '')
>>> bytes(se.finalize()).hex()
'00000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000361626300'))
>>> decode_text(de)
'abc'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000361626301'))
>>> try:
...     decode_text(de)
... except InvalidPaddingError as e:
...     print(*e.args)
non-zero padding byte

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000005'))
>>> try:
...     decode_text(de, max_length=4)
... except TooLongError as e:
...     print(*e.args)
text length 5 exceeds maximum of 4
"""

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.consts import DEFAULT_TEXT_MAX_LENGTH
from xdrcodec.serialization.encoding.int import decode_int, encode_int
from xdrcodec.serialization.encoding.padding import PaddingPolicy, skip_padding, write_padding
from xdrcodec.serialization.exceptions import InvalidPaddingError, TextEncodingError, TooLongError  # noqa: F401

DEFAULT_TEXT_ENCODING = 'latin-1'


def encode_text(
    serializer: Serializer,
    value: str,
    *,
    encoding: str = DEFAULT_TEXT_ENCODING,
    padding: PaddingPolicy = PaddingPolicy.CANONICAL,
    max_length: int = DEFAULT_TEXT_MAX_LENGTH,
) -> None:
    """ Encode a text as length prefix, bytes and zero padding.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    try:
        data = value.encode(encoding)
    except UnicodeEncodeError as e:
        raise TextEncodingError(f'{value!r} cannot be encoded as {encoding}') from e
    if len(data) > max_length:
        raise TooLongError(f'text length {len(data)} exceeds maximum of {max_length}')
    encode_int(serializer, len(data), length=4, signed=False)
    serializer.write_bytes(data)
    write_padding(serializer, len(data), padding)


def decode_text(
    deserializer: Deserializer,
    *,
    encoding: str = DEFAULT_TEXT_ENCODING,
    padding: PaddingPolicy = PaddingPolicy.CANONICAL,
    strict_padding: bool = True,
    max_length: int = DEFAULT_TEXT_MAX_LENGTH,
) -> str:
    """ Decode a text written by `encode_text`, the length is checked against `max_length` before reading the data.

    This modules's docstring has more details and examples.
    """
    length = decode_int(deserializer, length=4, signed=False)
    if length > max_length:
        raise TooLongError(f'text length {length} exceeds maximum of {max_length}')
    data = bytes(deserializer.read_bytes(length))
    skip_padding(deserializer, length, padding, strict=strict_padding)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise TextEncodingError(f'{data!r} is not valid {encoding}') from e
