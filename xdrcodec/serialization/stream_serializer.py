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

from .exceptions import XdrIOError
from .serializer import Serializer
from .types import Buffer


class StreamSerializer(Serializer):
    """Serializer that writes straight into a binary file-like object (a file, a socket's makefile, ...).

    Any `OSError` raised by the stream is wrapped in a `XdrIOError`. There's no buffering here besides whatever the
    stream itself does, `flush()` is forwarded to the stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pos: int = 0

    @override
    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise XdrIOError('failed to flush stream') from e

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data)
        while view:
            try:
                written = self._stream.write(view)
            except OSError as e:
                raise XdrIOError('failed to write to stream') from e
            # XXX: buffered streams return None or len(view), raw streams may do partial writes
            if written is None:
                written = len(view)
            if written <= 0:
                raise XdrIOError('stream did not accept any bytes')
            self._pos += written
            view = view[written:]
