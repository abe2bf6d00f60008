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


from typing import TypeVar

from typing_extensions import override

from xdrcodec.serialization.deserializer import Deserializer

from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter

D = TypeVar('D', bound=Deserializer)


class CountingDeserializer(GenericDeserializerAdapter[D]):
    """Keeps a running total of the bytes pulled from the inner deserializer.

    Only bytes that were actually delivered are counted, a short read (with `exact=False`) counts what it returned.
    """

    def __init__(self, deserializer: D) -> None:
        super().__init__(deserializer)
        self._bytes_read = 0

    @property
    def bytes_read(self) -> int:
        return self._bytes_read

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        data = super().read_bytes(n, exact=exact)
        self._bytes_read += memoryview(data).nbytes
        return data

    @override
    def read_all(self) -> Buffer:
        data = super().read_all()
        self._bytes_read += memoryview(data).nbytes
        return data
