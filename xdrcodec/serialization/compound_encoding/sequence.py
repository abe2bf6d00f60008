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
A sequence is any sized iterable of values of the same type, `list[T]` and `tuple[T, ...]` in annotations.

Layout: [N: unsigned 32-bit][value_0]...[value_N-1]

>>> from xdrcodec.serialization.encoding.text import encode_text, decode_text
>>> se = Serializer.build_bytes_serializer()
>>> encode_sequence(se, ['ab', 'c'], encode_text)
>>> bytes(se.finalize()).hex()
'0000000200000002616200000000000163000000'

Breakdown of the result:

    00000002: 2 elements
    0000000261620000: 'ab' with length prefix and 2 bytes of padding
    0000000163000000: 'c' with length prefix and 3 bytes of padding

Decoding is driven by a `SequenceCountdown`, the count is only read when the first element is requested:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000200000002616200000000000163000000'))
>>> decode_sequence(de, decode_text, tuple)
('ab', 'c')
>>> de.finalize()
"""

from collections.abc import Collection, Iterable, Iterator
from enum import Enum, auto
from typing import Callable, TypeVar

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.consts import DEFAULT_SEQUENCE_MAX_LENGTH
from xdrcodec.serialization.encoding.int import decode_int, encode_int
from xdrcodec.serialization.exceptions import TooLongError

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


class CountdownState(Enum):
    UNSTARTED = auto()
    REMAINING = auto()
    DONE = auto()


class SequenceCountdown:
    """Tracks how many elements are still due while decoding a sequence.

    The state moves `UNSTARTED -> REMAINING(n) -> DONE`. When no `length` is given the count is read from the
    deserializer as an unsigned 32-bit prefix on the first `advance()`, a preset `length` (used by structs, whose field
    count is known from the declaration) skips the prefix entirely.
    """

    __slots__ = ('_deserializer', '_max_length', '_state', '_remaining', '_total')

    def __init__(
        self,
        deserializer: Deserializer,
        *,
        length: int | None = None,
        max_length: int = DEFAULT_SEQUENCE_MAX_LENGTH,
    ) -> None:
        self._deserializer = deserializer
        self._max_length = max_length
        self._state = CountdownState.UNSTARTED
        self._remaining = 0
        self._total: int | None = None
        if length is not None:
            self._set_length(length)

    @property
    def state(self) -> CountdownState:
        return self._state

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def total(self) -> int | None:
        """Number of elements announced, `None` while still unstarted."""
        return self._total

    def _set_length(self, length: int) -> None:
        if length > self._max_length:
            raise TooLongError(f'sequence length {length} exceeds maximum of {self._max_length}')
        self._total = length
        self._remaining = length
        self._state = CountdownState.REMAINING

    def advance(self) -> bool:
        """Return `True` if one more element must be decoded now, `False` once the sequence ended."""
        if self._state is CountdownState.UNSTARTED:
            self._set_length(decode_int(self._deserializer, length=4, signed=False))
        if self._state is CountdownState.DONE:
            return False
        if self._remaining == 0:
            self._state = CountdownState.DONE
            return False
        self._remaining -= 1
        return True

    def __iter__(self) -> Iterator[None]:
        while self.advance():
            yield None

    def __repr__(self) -> str:
        if self._state is CountdownState.REMAINING:
            return f'SequenceCountdown(REMAINING({self._remaining}))'
        return f'SequenceCountdown({self._state.name})'


def encode_sequence(
    serializer: Serializer,
    values: Collection[T],
    encoder: Encoder[T],
    *,
    max_length: int = DEFAULT_SEQUENCE_MAX_LENGTH,
) -> None:
    if len(values) > max_length:
        raise TooLongError(f'sequence length {len(values)} exceeds maximum of {max_length}')
    encode_int(serializer, len(values), length=4, signed=False)
    for value in values:
        encoder(serializer, value)


def decode_sequence(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: int = DEFAULT_SEQUENCE_MAX_LENGTH,
) -> R:
    countdown = SequenceCountdown(deserializer, max_length=max_length)
    return builder(decoder(deserializer) for _ in countdown)
