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

from xdrcodec.serialization.exceptions import DomainViolationError, ValueRangeError
from xdrcodec.xdr_types.primitive_xdr_type import PrimitiveXdrType
from xdrcodec.xdr_types.xdr_type import PrimitiveKind


class _SizedIntXdrType(PrimitiveXdrType[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.
    """

    kind = PrimitiveKind.INTEGER

    @classmethod
    def upper_bound(cls) -> int:
        if cls.signed:
            return 2**(cls.width * 8 - 1) - 1
        else:
            return 2**(cls.width * 8) - 1

    @classmethod
    def lower_bound(cls) -> int:
        if cls.signed:
            return -(2**(cls.width * 8 - 1))
        else:
            return 0

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # XXX: bool is a subclass of int, but a bool where an integer is declared is almost certainly a mistake
        if isinstance(value, bool) or not isinstance(value, int):
            raise DomainViolationError(f'expected integer, got {type(value).__name__}')
        if not self.lower_bound() <= value <= self.upper_bound():
            raise ValueRangeError(f'{value} is out of range for {type(self).__name__}')


class Int8XdrType(_SizedIntXdrType):
    signed = True
    width = 1


class Uint8XdrType(_SizedIntXdrType):
    signed = False
    width = 1


class Int16XdrType(_SizedIntXdrType):
    signed = True
    width = 2


class Uint16XdrType(_SizedIntXdrType):
    signed = False
    width = 2


class Int32XdrType(_SizedIntXdrType):
    signed = True
    width = 4  # XDR int


class Uint32XdrType(_SizedIntXdrType):
    signed = False
    width = 4  # XDR unsigned int


class Int64XdrType(_SizedIntXdrType):
    signed = True
    width = 8  # XDR hyper


class Uint64XdrType(_SizedIntXdrType):
    signed = False
    width = 8  # XDR unsigned hyper
