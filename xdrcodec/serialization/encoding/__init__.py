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
Leaf encodings: one XDR primitive per submodule (fixed-width integers, floats, booleans, characters, text).

Every submodule exposes a pair of functions working directly on a `Serializer` or `Deserializer`:

    def encode_x(serializer: Serializer, value: ValueType, *, ...options) -> None: ...
    def decode_x(deserializer: Deserializer, *, ...options) -> ValueType: ...

Options are plain values (a width, a text encoding, a padding policy), never other encoders, the shapes that nest
other values live in `compound_encoding`. All multi-byte values are big-endian.
"""
