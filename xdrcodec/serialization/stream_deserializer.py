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


from typing import BinaryIO

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import DomainViolationError, OutOfDataError, XdrIOError


class StreamDeserializer(Deserializer):
    """Deserializer that pulls bytes from a binary file-like object.

    Reads block until the stream delivers the requested amount or reaches EOF. Checking `is_empty()` needs to read one
    byte ahead, that byte is kept and handed out by the next read.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._lookahead = b''

    def _read_raw(self, n: int) -> bytes:
        parts: list[bytes] = []
        missing = n
        while missing > 0:
            try:
                chunk = self._stream.read(missing)
            except OSError as e:
                raise XdrIOError('failed to read from stream') from e
            if chunk is None:
                raise XdrIOError('stream has no data available (non-blocking stream?)')
            if not chunk:
                break
            parts.append(chunk)
            missing -= len(chunk)
        return b''.join(parts)

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise DomainViolationError('trailing byte(s) after the value')

    @override
    def is_empty(self) -> bool:
        if not self._lookahead:
            self._lookahead = self._read_raw(1)
        return not self._lookahead

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        head, self._lookahead = self._lookahead[:n], self._lookahead[n:]
        data = head + self._read_raw(n - len(head))
        if exact and len(data) < n:
            raise OutOfDataError('not enough bytes to read')
        return data

    @override
    def read_all(self) -> bytes:
        head, self._lookahead = self._lookahead, b''
        try:
            rest = self._stream.read()
        except OSError as e:
            raise XdrIOError('failed to read from stream') from e
        return head + (rest or b'')
