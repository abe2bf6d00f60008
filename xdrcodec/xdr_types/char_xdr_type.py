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

from xdrcodec.serialization.exceptions import DomainViolationError
from xdrcodec.xdr_types.primitive_xdr_type import PrimitiveXdrType
from xdrcodec.xdr_types.xdr_type import PrimitiveKind


class CharXdrType(PrimitiveXdrType[str]):
    kind = PrimitiveKind.CHAR
    width = 1
    signed = False

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise DomainViolationError(f'expected a single character, got {value!r}')
