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


from typing import Generic, TypeVar

from typing_extensions import override

from xdrcodec.serialization.deserializer import Deserializer
from xdrcodec.serialization.serializer import Serializer

from ..types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class GenericSerializerAdapter(Serializer, Generic[S]):
    """Forwards everything to `inner`, subclasses override the calls they need to observe or restrict."""

    inner: S

    def __init__(self, serializer: S) -> None:
        self.inner = serializer

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_bytes(self, data: Buffer) -> None:
        self.inner.write_bytes(data)

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def flush(self) -> None:
        self.inner.flush()


class GenericDeserializerAdapter(Deserializer, Generic[D]):
    """Forwards everything to `inner`, subclasses override the calls they need to observe or restrict."""

    inner: D

    def __init__(self, deserializer: D) -> None:
        self.inner = deserializer

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        return self.inner.read_all()

    @override
    def finalize(self) -> None:
        self.inner.finalize()
