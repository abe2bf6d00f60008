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


from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, BinaryIO

from typing_extensions import Self

from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer
    from .stream_serializer import StreamSerializer


class Serializer(ABC):
    """ Append-only byte sink.

    Implementations only provide `write_bytes` and `cur_pos`, everything else is built on top of them. Nothing is ever
    written speculatively: once bytes are handed to a serializer they are part of the output.
    """

    @abstractmethod
    def cur_pos(self) -> int:
        """Total number of bytes written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        raise NotImplementedError

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError(f'{type(self).__name__} does not hold its output')

    def flush(self) -> None:
        """Push buffered bytes to the underlying sink, if there is any."""

    def write_byte(self, data: int) -> None:
        self.write_bytes(bytes((data,)))

    def write_zeros(self, n: int) -> None:
        if n:
            self.write_bytes(bytes(n))

    def write_packed(self, format: str, *values: Any) -> None:
        """Write `values` packed with a `struct` format string, which should always be big-endian (`>`) for XDR."""
        self.write_bytes(struct.pack(format, *values))

    def with_limit(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        """Wrap this serializer so that writing more than `max_bytes` fails, `None` means no limit."""
        if max_bytes is None:
            return self
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    @staticmethod
    def build_stream_serializer(stream: BinaryIO) -> StreamSerializer:
        from .stream_serializer import StreamSerializer
        return StreamSerializer(stream)
