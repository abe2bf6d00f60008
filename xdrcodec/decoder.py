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


from collections.abc import Mapping, Sequence
from typing import Any, Callable, NoReturn, TypeVar

from structlog import get_logger
from typing_extensions import assert_never

from xdrcodec.conf import XdrSettings, get_global_settings
from xdrcodec.serialization import Deserializer
from xdrcodec.serialization.adapters import CountingDeserializer
from xdrcodec.serialization.compound_encoding import Decoder
from xdrcodec.serialization.compound_encoding.enum import decode_enum
from xdrcodec.serialization.compound_encoding.sequence import decode_sequence
from xdrcodec.serialization.compound_encoding.struct import decode_struct
from xdrcodec.serialization.compound_encoding.union import DiscriminantTable, decode_union
from xdrcodec.serialization.encoding.bool import decode_bool
from xdrcodec.serialization.encoding.char import decode_char
from xdrcodec.serialization.encoding.float import decode_float
from xdrcodec.serialization.encoding.int import decode_int
from xdrcodec.serialization.encoding.padding import PaddingPolicy
from xdrcodec.serialization.encoding.text import decode_text
from xdrcodec.serialization.exceptions import UnsupportedShapeError
from xdrcodec.xdr_types import (
    EnumXdrType,
    PrimitiveKind,
    PrimitiveXdrType,
    SequenceXdrType,
    Shape,
    StructXdrType,
    UnionXdrType,
    XdrType,
)

logger = get_logger()

T = TypeVar('T')

_INTEGER_WIDTHS = (1, 2, 4, 8)


class XdrDecoder:
    """ Reads values from a deserializer following the XDR framing rules.

    Like `XdrEncoder`, a decoder is a session for one top-level value. It wraps the deserializer in a
    `CountingDeserializer`, so `bytes_consumed` is always the number of bytes actually pulled from the source, prefixes
    and padding included.
    """

    __slots__ = ('_deserializer', '_padding', '_strict_padding', '_text_encoding', '_max_text_length',
                 '_max_sequence_length', 'log')

    def __init__(
        self,
        deserializer: Deserializer,
        *,
        settings: XdrSettings | None = None,
        padding: PaddingPolicy | None = None,
        strict_padding: bool | None = None,
    ) -> None:
        settings = settings if settings is not None else get_global_settings()
        self._deserializer = CountingDeserializer(deserializer)
        self._padding = padding if padding is not None else settings.PADDING_POLICY
        self._strict_padding = strict_padding if strict_padding is not None else settings.STRICT_PADDING
        self._text_encoding = settings.TEXT_ENCODING
        self._max_text_length = settings.MAX_TEXT_LENGTH
        self._max_sequence_length = settings.MAX_SEQUENCE_LENGTH
        self.log = logger.new()

    @property
    def bytes_consumed(self) -> int:
        return self._deserializer.bytes_read

    def read_integer(self, width: int, signed: bool) -> int:
        if width not in _INTEGER_WIDTHS:
            raise UnsupportedShapeError(f'integers of {width} bytes are not supported')
        return decode_int(self._deserializer, length=width, signed=signed)

    def read_float(self, width: int) -> float:
        if width not in (4, 8):
            raise UnsupportedShapeError(f'floats of {width} bytes are not supported')
        return decode_float(self._deserializer, length=width)

    def read_bool(self) -> bool:
        return decode_bool(self._deserializer)

    def read_char(self) -> str:
        return decode_char(self._deserializer, encoding=self._text_encoding)

    def read_text(self) -> str:
        return decode_text(
            self._deserializer,
            encoding=self._text_encoding,
            padding=self._padding,
            strict_padding=self._strict_padding,
            max_length=self._max_text_length,
        )

    def read_sequence(self, element_reader: Callable[[], T]) -> list[T]:
        """ Read the element count, then call `element_reader()` once per element and return the elements.
        """
        def decode_element(_deserializer: Deserializer, /) -> T:
            return element_reader()
        return decode_sequence(self._deserializer, decode_element, list, max_length=self._max_sequence_length)

    def read_struct(self, field_count: int, field_readers: Sequence[Callable[[], Any]]) -> tuple[Any, ...]:
        """ Call each field reader in order and return the field values.
        """
        if len(field_readers) != field_count:
            raise UnsupportedShapeError(f'expected {field_count} field readers, got {len(field_readers)}')
        return decode_struct(self._deserializer, [self._decoder_from_reader(reader) for reader in field_readers])

    def read_enum(self, variants: Mapping[int, T]) -> T:
        return decode_enum(self._deserializer, variants)

    def read_union(self, table: DiscriminantTable) -> tuple[int, int]:
        """ Read a selector and resolve it, returns `(arm index, selector)`, the payload is left for the caller.
        """
        selector = decode_int(self._deserializer, length=4, signed=False)
        return table.resolve(selector), selector

    def read_any(self) -> NoReturn:
        raise UnsupportedShapeError('XDR is not self-describing, a type is required to decode')

    def read_option(self) -> NoReturn:
        raise UnsupportedShapeError('optional values are not supported')

    def read_opaque(self) -> NoReturn:
        raise UnsupportedShapeError('opaque data is not supported')

    def read_map(self) -> NoReturn:
        raise UnsupportedShapeError('maps are not supported')

    def read_value(self, xdr_type: XdrType[T]) -> T:
        """ Decode a value as described by `xdr_type`, recursing into compound shapes.
        """
        value: Any
        match xdr_type.shape:
            case Shape.PRIMITIVE:
                assert isinstance(xdr_type, PrimitiveXdrType)
                value = self._read_primitive(xdr_type)
            case Shape.TEXT:
                value = self.read_text()
            case Shape.SEQUENCE:
                assert isinstance(xdr_type, SequenceXdrType)
                value = decode_sequence(
                    self._deserializer,
                    self._decoder_for(xdr_type.element),
                    xdr_type.build,
                    max_length=self._max_sequence_length,
                )
            case Shape.STRUCT:
                assert isinstance(xdr_type, StructXdrType)
                field_decoders = [self._decoder_for(field_xdr_type) for _, field_xdr_type in xdr_type.iter_fields()]
                value = xdr_type.build(decode_struct(self._deserializer, field_decoders))
            case Shape.ENUM:
                assert isinstance(xdr_type, EnumXdrType)
                value = self.read_enum(xdr_type.variants)
            case Shape.UNION:
                assert isinstance(xdr_type, UnionXdrType)
                arm_decoders = [None if arm is None else self._decoder_for(arm) for arm in xdr_type.arms]
                index, selector, payload = decode_union(self._deserializer, xdr_type.table, arm_decoders)
                if xdr_type.table.is_default(index):
                    self.log.debug('union selector handled by default arm', union=repr(xdr_type), selector=selector)
                value = xdr_type.build(index, selector, payload)
            case Shape.OPTION:
                self.read_option()
            case Shape.OPAQUE:
                self.read_opaque()
            case Shape.MAP:
                self.read_map()
            case _:
                assert_never(xdr_type.shape)
        return value

    def _read_primitive(self, xdr_type: PrimitiveXdrType[Any]) -> Any:
        match xdr_type.kind:
            case PrimitiveKind.INTEGER:
                return self.read_integer(xdr_type.width, xdr_type.signed)
            case PrimitiveKind.FLOAT:
                return self.read_float(xdr_type.width)
            case PrimitiveKind.BOOL:
                return self.read_bool()
            case PrimitiveKind.CHAR:
                return self.read_char()
            case _:
                assert_never(xdr_type.kind)

    def _decoder_for(self, xdr_type: XdrType[T]) -> Decoder[T]:
        """ Adapt `read_value` to the `Decoder` protocol expected by compound encodings.
        """
        def decoder(_deserializer: Deserializer, /) -> T:
            return self.read_value(xdr_type)
        return decoder

    @staticmethod
    def _decoder_from_reader(reader: Callable[[], T]) -> Decoder[T]:
        def decoder(_deserializer: Deserializer, /) -> T:
            return reader()
        return decoder
