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
A struct has no framing of its own, its encoding is the concatenation of the encoding of each field in declaration
order. The field count is known from the declaration, so decoding uses a `SequenceCountdown` preset to that count
instead of reading a prefix.

>>> from functools import partial
>>> from xdrcodec.serialization.encoding.int import encode_int, decode_int
>>> u32, u8 = partial(encode_int, length=4, signed=False), partial(encode_int, length=1, signed=False)
>>> se = Serializer.build_bytes_serializer()
>>> encode_struct(se, (7, 1), (u32, u8))
>>> bytes(se.finalize()).hex()
'0000000701'

Breakdown of the result:

    00000007: first field, unsigned 32-bit
    01: second field, unsigned 8-bit

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000701'))
>>> read_u32, read_u8 = partial(decode_int, length=4, signed=False), partial(decode_int, length=1, signed=False)
>>> decode_struct(de, (read_u32, read_u8))
(7, 1)
>>> de.finalize()
"""

from collections.abc import Sequence
from typing import Any

from xdrcodec.serialization import Deserializer, Serializer

from . import Decoder, Encoder
from .sequence import SequenceCountdown


def encode_struct(serializer: Serializer, values: Sequence[Any], encoders: Sequence[Encoder[Any]]) -> None:
    assert len(values) == len(encoders)
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_struct(deserializer: Deserializer, decoders: Sequence[Decoder[Any]]) -> tuple[Any, ...]:
    countdown = SequenceCountdown(deserializer, length=len(decoders))
    fields = iter(decoders)
    return tuple(next(fields)(deserializer) for _ in countdown)
