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


from typing import Any

from typing_extensions import Self, override

from xdrcodec.serialization.exceptions import DomainViolationError
from xdrcodec.xdr_types.xdr_type import Shape, XdrType


class TextXdrType(XdrType[str]):
    """ Variable-length text, the byte encoding and padding rule are session settings and not part of the type.
    """

    shape = Shape.TEXT

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: XdrType.TypeMap) -> Self:
        return cls()

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise DomainViolationError(f'expected str, got {type(value).__name__}')

    def __eq__(self, other: Any) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))
