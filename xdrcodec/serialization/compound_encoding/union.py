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
A discriminated union is encoded as an unsigned 32-bit selector followed by the payload of the chosen arm, arms with no
payload (XDR `void`) write nothing after the selector.

Which arm a selector picks is decided by a `DiscriminantTable`, built once per union type from the selector declared by
each arm. The position of an arm in the table is its local index:

>>> table = DiscriminantTable([0, 1, 7])
>>> table.resolve(7)
2
>>> table.selector_for(1)
1
>>> try:
...     table.resolve(3)
... except BadUnionIndexError as e:
...     print(*e.args)
bad index for union

An arm declared with no selector is the XDR `default:` arm, it is chosen for every selector no other arm claims:

>>> table = DiscriminantTable([0, None])
>>> table.resolve(0), table.resolve(42)
(0, 1)

Tables can also be built from numeric arm names:

>>> DiscriminantTable.from_variant_names(['3', '4'])
DiscriminantTable([3, 4])
>>> try:
...     DiscriminantTable.from_variant_names(['3', 'four'])
... except BadUnionIndexError as e:
...     print(*e.args)
variant name 'four' is not an unsigned number

>>> from xdrcodec.serialization.encoding.text import encode_text, decode_text
>>> se = Serializer.build_bytes_serializer()
>>> encode_union(se, 1, 'hi', encode_text)
>>> bytes(se.finalize()).hex()
'000000010000000268690000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000010000000268690000'))
>>> decode_union(de, DiscriminantTable([0, 1]), (None, decode_text))
(1, 1, 'hi')
>>> de.finalize()
"""

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from typing_extensions import Self

from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.serialization.consts import MAX_U32
from xdrcodec.serialization.encoding.int import decode_int, encode_int
from xdrcodec.serialization.exceptions import BadUnionIndexError

from . import Decoder, Encoder

T = TypeVar('T')


class DiscriminantTable:
    """Explicit mapping between the wire selectors of a union and the local index of its arms.

    Selectors must be unsigned 32-bit integers and unique, and at most one arm can be the default (`None`). An
    inconsistent table is rejected when built, so any later failure is a mismatch with the bytes being decoded.
    """

    __slots__ = ('_selectors', '_by_selector', '_default_index')

    _selectors: tuple[int | None, ...]
    _by_selector: dict[int, int]
    _default_index: int | None

    def __init__(self, selectors: Iterable[int | None]) -> None:
        self._selectors = tuple(selectors)
        self._by_selector = {}
        self._default_index = None
        for index, selector in enumerate(self._selectors):
            if selector is None:
                if self._default_index is not None:
                    raise BadUnionIndexError('a union can have at most one default arm')
                self._default_index = index
                continue
            if isinstance(selector, bool) or not isinstance(selector, int) or not 0 <= selector <= MAX_U32:
                raise BadUnionIndexError(f'selector {selector!r} is not an unsigned 32-bit integer')
            if selector in self._by_selector:
                raise BadUnionIndexError(f'duplicate selector {selector}')
            self._by_selector[selector] = index

    @classmethod
    def from_variant_names(cls, names: Iterable[str]) -> Self:
        """Build a table where each arm name is its selector written in decimal, as in `['0', '1', '2']`."""
        selectors: list[int | None] = []
        for name in names:
            if not (name.isascii() and name.isdigit()):
                raise BadUnionIndexError(f'variant name {name!r} is not an unsigned number')
            selectors.append(int(name))
        return cls(selectors)

    def __len__(self) -> int:
        return len(self._selectors)

    def __repr__(self) -> str:
        return f'DiscriminantTable({list(self._selectors)!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, DiscriminantTable) and self._selectors == other._selectors

    def __hash__(self) -> int:
        return hash(self._selectors)

    @property
    def default_index(self) -> int | None:
        return self._default_index

    def is_default(self, index: int) -> bool:
        return index == self._default_index

    def resolve(self, selector: int) -> int:
        """Local index of the arm that handles `selector`."""
        index = self._by_selector.get(selector, self._default_index)
        if index is None:
            raise BadUnionIndexError('bad index for union')
        return index

    def selector_for(self, index: int, received: int | None = None) -> int:
        """Wire selector for the arm at `index`.

        The default arm has no selector of its own, the one it was decoded with (`received`) is used instead and it
        must not belong to any other arm.
        """
        if not 0 <= index < len(self._selectors):
            raise BadUnionIndexError(f'arm index {index} out of range')
        selector = self._selectors[index]
        if selector is not None:
            return selector
        if received is None:
            raise BadUnionIndexError('the default arm needs an explicit selector')
        if received in self._by_selector:
            raise BadUnionIndexError(f'selector {received} belongs to another arm')
        return received


def encode_union(serializer: Serializer, selector: int, payload: T, encoder: Encoder[T] | None) -> None:
    encode_int(serializer, selector, length=4, signed=False)
    if encoder is not None:
        encoder(serializer, payload)


def decode_union(
    deserializer: Deserializer,
    table: DiscriminantTable,
    decoders: Sequence[Decoder[Any] | None],
) -> tuple[int, int, Any]:
    """ Read a selector, resolve it and decode the arm's payload, returns `(index, selector, payload)`.
    """
    assert len(decoders) == len(table)
    selector = decode_int(deserializer, length=4, signed=False)
    index = table.resolve(selector)
    decoder = decoders[index]
    payload = decoder(deserializer) if decoder is not None else None
    return index, selector, payload
