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
XDR aligns variable-length data to 4 byte units by appending zero bytes. Two padding rules are supported:

- `PaddingPolicy.CANONICAL`: the RFC 4506 rule, `(4 - n % 4) % 4` bytes, nothing is added when already aligned;
- `PaddingPolicy.LEGACY`: `4 - n % 4` bytes, a full unit of zeros is added when already aligned.

>>> [padding_length(n, PaddingPolicy.CANONICAL) for n in range(6)]
[0, 3, 2, 1, 0, 3]
>>> [padding_length(n, PaddingPolicy.LEGACY) for n in range(6)]
[4, 3, 2, 1, 4, 3]

>>> se = Serializer.build_bytes_serializer()
>>> write_padding(se, 5, PaddingPolicy.CANONICAL)
>>> bytes(se.finalize()).hex()
'000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000001'))
>>> skip_padding(de, 4, PaddingPolicy.LEGACY, strict=True)
4
>>> try:
...     skip_padding(de, 3, PaddingPolicy.LEGACY, strict=True)
... except InvalidPaddingError as e:
...     print(*e.args)
non-zero padding byte
"""

from enum import Enum

from typing_extensions import assert_never

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.consts import XDR_UNIT_SIZE
from xdrcodec.serialization.exceptions import InvalidPaddingError


class PaddingPolicy(str, Enum):
    CANONICAL = 'canonical'
    LEGACY = 'legacy'


def padding_length(length: int, policy: PaddingPolicy) -> int:
    """ Number of zero bytes that follow `length` bytes of variable-length data.
    """
    match policy:
        case PaddingPolicy.CANONICAL:
            return (XDR_UNIT_SIZE - length % XDR_UNIT_SIZE) % XDR_UNIT_SIZE
        case PaddingPolicy.LEGACY:
            return XDR_UNIT_SIZE - length % XDR_UNIT_SIZE
        case _:
            assert_never(policy)


def write_padding(serializer: Serializer, length: int, policy: PaddingPolicy) -> None:
    serializer.write_bytes(bytes(padding_length(length, policy)))


def skip_padding(deserializer: Deserializer, length: int, policy: PaddingPolicy, *, strict: bool) -> int:
    """ Consume the padding that follows `length` bytes of data and return how many bytes were skipped.

    With `strict=True` any non-zero byte is rejected.
    """
    pad = padding_length(length, policy)
    data = deserializer.read_bytes(pad)
    if strict and any(bytes(data)):
        raise InvalidPaddingError('non-zero padding byte')
    return pad
