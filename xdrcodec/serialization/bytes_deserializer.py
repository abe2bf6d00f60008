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


from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import DomainViolationError, OutOfDataError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """ In-memory deserializer over any buffer.

    Reads return zero-copy slices of the original data, the caller must copy them if the underlying buffer can change.
    """

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).cast('B')
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._view) - self._offset

    @override
    def finalize(self) -> None:
        if self.remaining:
            raise DomainViolationError(f'{self.remaining} trailing byte(s) after the value')

    @override
    def is_empty(self) -> bool:
        return not self.remaining

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if exact and n > self.remaining:
            raise OutOfDataError(f'{n} byte(s) requested, only {self.remaining} left')
        start = self._offset
        self._offset = min(start + n, len(self._view))
        return self._view[start:self._offset]

    @override
    def read_all(self) -> memoryview:
        return self.read_bytes(self.remaining)
