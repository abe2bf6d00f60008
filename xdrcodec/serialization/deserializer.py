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
    from .adapters import MaxBytesDeserializer
    from .bytes_deserializer import BytesDeserializer
    from .stream_deserializer import StreamDeserializer


class Deserializer(ABC):
    """ Sequential byte source.

    Implementations provide `read_bytes`, `read_all` and `is_empty`, bytes are consumed as they are returned and there
    is no way back.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """ Consume `n` bytes.

        With `exact=True` a source that ends early raises `OutOfDataError`, otherwise whatever was available is returned.
        """
        raise NotImplementedError

    @abstractmethod
    def read_all(self) -> Buffer:
        """Consume everything until the source is empty."""
        raise NotImplementedError

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError(f'{type(self).__name__} cannot tell whether all bytes were consumed')

    def read_byte(self) -> int:
        """Consume a single byte and return it as an unsigned int."""
        return memoryview(self.read_bytes(1))[0]

    def read_packed(self, format: str) -> tuple[Any, ...]:
        """Consume and unpack exactly the bytes described by a `struct` format string."""
        return struct.unpack(format, self.read_bytes(struct.calcsize(format)))

    def with_limit(self, max_bytes: int | None) -> Self | MaxBytesDeserializer[Self]:
        """Wrap this deserializer so that reading more than `max_bytes` fails, `None` means no limit."""
        if max_bytes is None:
            return self
        from .adapters import MaxBytesDeserializer
        return MaxBytesDeserializer(self, max_bytes)

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @staticmethod
    def build_stream_deserializer(stream: BinaryIO) -> StreamDeserializer:
        from .stream_deserializer import StreamDeserializer
        return StreamDeserializer(stream)
