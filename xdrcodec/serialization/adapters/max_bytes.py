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
from xdrcodec.serialization.exceptions import TooLongError
from xdrcodec.serialization.serializer import Serializer

from ..types import Buffer
from .generic_adapter import GenericDeserializerAdapter, GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(TooLongError):
    """ An operation would go past the byte budget of a `MaxBytesSerializer` or `MaxBytesDeserializer`.

    The limit is checked before anything is passed to (or taken from) the inner object, but the value being processed
    is incomplete at that point and the whole operation must be treated as failed.
    """


class _ByteBudget:
    __slots__ = ('max_bytes', 'used')

    def __init__(self, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self.max_bytes = max_bytes
        self.used = 0

    @property
    def left(self) -> int:
        return self.max_bytes - self.used

    def spend(self, n: int) -> None:
        if n > self.left:
            raise MaxBytesExceededError(f'{n} byte(s) requested, only {self.left} of {self.max_bytes} left')
        self.used += n


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._budget = _ByteBudget(max_bytes)

    @property
    def bytes_left(self) -> int:
        return self._budget.left

    @override
    def write_bytes(self, data: Buffer) -> None:
        view = memoryview(data)
        self._budget.spend(view.nbytes)
        super().write_bytes(view)


class MaxBytesDeserializer(GenericDeserializerAdapter[D]):
    def __init__(self, deserializer: D, max_bytes: int) -> None:
        super().__init__(deserializer)
        self._budget = _ByteBudget(max_bytes)

    @property
    def bytes_left(self) -> int:
        return self._budget.left

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if not exact:
            n = min(n, self._budget.left)
        self._budget.spend(n)
        return super().read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        data = super().read_bytes(self._budget.left, exact=False)
        self._budget.spend(memoryview(data).nbytes)
        if not self.is_empty():
            raise MaxBytesExceededError(f'more than {self._budget.max_bytes} byte(s) available')
        return data
