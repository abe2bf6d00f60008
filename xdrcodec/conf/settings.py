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


import codecs

from pydantic import Field, field_validator

from xdrcodec.serialization.consts import MAX_U32
from xdrcodec.serialization.encoding.padding import PaddingPolicy
from xdrcodec.utils.pydantic import BaseModel


class XdrSettings(BaseModel):
    """Codec-wide defaults, every `XdrEncoder`/`XdrDecoder` session reads them once when created."""

    # How text payloads are padded to the 4-byte XDR unit, see `xdrcodec.serialization.encoding.padding`.
    PADDING_POLICY: PaddingPolicy = PaddingPolicy.CANONICAL

    # Reject non-zero padding bytes when decoding.
    STRICT_PADDING: bool = True

    # Python codec used for text, latin-1 maps each character to exactly one byte.
    TEXT_ENCODING: str = 'latin-1'

    # Upper bounds checked against length prefixes before any payload is read.
    MAX_TEXT_LENGTH: int = Field(default=MAX_U32, ge=0, le=MAX_U32)
    MAX_SEQUENCE_LENGTH: int = Field(default=MAX_U32, ge=0, le=MAX_U32)

    @field_validator('TEXT_ENCODING')
    @classmethod
    def check_text_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f'unknown text encoding: {value!r}') from e
        return value
