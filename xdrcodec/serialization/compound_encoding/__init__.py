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

"""
Encodings for the shapes that nest other values: sequences, enums, structs and unions.

A compound encoding never knows how its children are written, it receives them as `Encoder`/`Decoder` callables and
only adds its own framing (an element count, a discriminant, ...) around them:

    def encode_x(serializer: Serializer, value: ValueType, ...child encoders, options) -> None: ...
    def decode_x(deserializer: Deserializer, ...child decoders, options) -> ValueType: ...

Choosing the child encoders for a given Python type is done by `xdrcodec.xdr_types`, not here.
"""

from typing import Protocol, TypeVar

from xdrcodec.serialization.deserializer import Deserializer
from xdrcodec.serialization.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
