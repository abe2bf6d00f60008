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


from collections.abc import Iterable
from typing import Any, Callable, NoReturn

from structlog import get_logger
from typing_extensions import assert_never

from xdrcodec.conf import XdrSettings, get_global_settings
from xdrcodec.serialization import Serializer
from xdrcodec.serialization.compound_encoding import Encoder
from xdrcodec.serialization.compound_encoding.enum import encode_enum
from xdrcodec.serialization.compound_encoding.sequence import encode_sequence
from xdrcodec.serialization.compound_encoding.struct import encode_struct
from xdrcodec.serialization.compound_encoding.union import encode_union
from xdrcodec.serialization.encoding.bool import encode_bool
from xdrcodec.serialization.encoding.char import encode_char
from xdrcodec.serialization.encoding.float import encode_float
from xdrcodec.serialization.encoding.int import encode_int
from xdrcodec.serialization.encoding.padding import PaddingPolicy
from xdrcodec.serialization.encoding.text import encode_text
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

_INTEGER_WIDTHS = (1, 2, 4, 8)


class XdrEncoder:
    """ Writes values to a serializer following the XDR framing rules.

    An encoder is a session: it is created for one top-level value, holds the serializer it writes to and is thrown
    away afterwards. The `write_*` methods are the building blocks, `write_value` walks a value according to an
    `XdrType` and calls them. Errors are raised as `SerializationError` subclasses and leave the serializer with a
    partial value that must be discarded.
    """

    __slots__ = ('_serializer', '_start_pos', '_padding', '_text_encoding', '_max_text_length',
                 '_max_sequence_length', 'log')

    def __init__(
        self,
        serializer: Serializer,
        *,
        settings: XdrSettings | None = None,
        padding: PaddingPolicy | None = None,
    ) -> None:
        settings = settings if settings is not None else get_global_settings()
        self._serializer = serializer
        self._start_pos = serializer.cur_pos()
        self._padding = padding if padding is not None else settings.PADDING_POLICY
        self._text_encoding = settings.TEXT_ENCODING
        self._max_text_length = settings.MAX_TEXT_LENGTH
        self._max_sequence_length = settings.MAX_SEQUENCE_LENGTH
        self.log = logger.new()

    @property
    def bytes_written(self) -> int:
        """Bytes written by this session so far."""
        return self._serializer.cur_pos() - self._start_pos

    def write_integer(self, width: int, signed: bool, value: int) -> None:
        if width not in _INTEGER_WIDTHS:
            raise UnsupportedShapeError(f'integers of {width} bytes are not supported')
        encode_int(self._serializer, value, length=width, signed=signed)

    def write_float(self, width: int, value: float) -> None:
        if width not in (4, 8):
            raise UnsupportedShapeError(f'floats of {width} bytes are not supported')
        encode_float(self._serializer, value, length=width)

    def write_bool(self, value: bool) -> None:
        encode_bool(self._serializer, value)

    def write_char(self, value: str) -> None:
        encode_char(self._serializer, value, encoding=self._text_encoding)

    def write_text(self, value: str) -> None:
        encode_text(
            self._serializer,
            value,
            encoding=self._text_encoding,
            padding=self._padding,
            max_length=self._max_text_length,
        )

    def write_sequence(self, length: int, element_writer: Callable[[int], None]) -> None:
        """ Write the element count, then call `element_writer(index)` once per element.
        """
        def encode_element(_serializer: Serializer, index: int, /) -> None:
            element_writer(index)
        encode_sequence(self._serializer, range(length), encode_element, max_length=self._max_sequence_length)

    def write_struct(self, field_writers: Iterable[Callable[[], None]]) -> None:
        """ Call each field writer in order, structs have no framing of their own.
        """
        for field_writer in field_writers:
            field_writer()

    def write_enum(self, ordinal: int) -> None:
        encode_enum(self._serializer, ordinal)

    def write_union(self, selector: int, payload_writer: Callable[[], None] | None) -> None:
        """ Write the selector, then the payload if the arm has one.
        """
        def encode_payload(_serializer: Serializer, _payload: None, /) -> None:
            assert payload_writer is not None
            payload_writer()
        encode_union(self._serializer, selector, None, None if payload_writer is None else encode_payload)

    def write_option(self, value: Any) -> NoReturn:
        raise UnsupportedShapeError('optional values are not supported')

    def write_opaque(self, value: Any) -> NoReturn:
        raise UnsupportedShapeError('opaque data is not supported')

    def write_map(self, value: Any) -> NoReturn:
        raise UnsupportedShapeError('maps are not supported')

    def write_value(self, xdr_type: XdrType[Any], value: Any) -> None:
        """ Encode `value` as described by `xdr_type`, recursing into compound shapes.
        """
        xdr_type.check_value(value, deep=False)
        match xdr_type.shape:
            case Shape.PRIMITIVE:
                assert isinstance(xdr_type, PrimitiveXdrType)
                self._write_primitive(xdr_type, value)
            case Shape.TEXT:
                self.write_text(value)
            case Shape.SEQUENCE:
                assert isinstance(xdr_type, SequenceXdrType)
                encode_sequence(
                    self._serializer,
                    value,
                    self._encoder_for(xdr_type.element),
                    max_length=self._max_sequence_length,
                )
            case Shape.STRUCT:
                assert isinstance(xdr_type, StructXdrType)
                struct_fields = list(xdr_type.iter_fields())
                encode_struct(
                    self._serializer,
                    [getattr(value, field_name) for field_name, _ in struct_fields],
                    [self._encoder_for(field_xdr_type) for _, field_xdr_type in struct_fields],
                )
            case Shape.ENUM:
                assert isinstance(xdr_type, EnumXdrType)
                self.write_enum(xdr_type.ordinal_of(value))
            case Shape.UNION:
                assert isinstance(xdr_type, UnionXdrType)
                index, selector, payload = xdr_type.arm_of(value)
                arm_xdr_type = xdr_type.arms[index]
                encoder = None if arm_xdr_type is None else self._encoder_for(arm_xdr_type)
                encode_union(self._serializer, selector, payload, encoder)
            case Shape.OPTION:
                self.write_option(value)
            case Shape.OPAQUE:
                self.write_opaque(value)
            case Shape.MAP:
                self.write_map(value)
            case _:
                assert_never(xdr_type.shape)

    def _write_primitive(self, xdr_type: PrimitiveXdrType[Any], value: Any) -> None:
        match xdr_type.kind:
            case PrimitiveKind.INTEGER:
                self.write_integer(xdr_type.width, xdr_type.signed, value)
            case PrimitiveKind.FLOAT:
                self.write_float(xdr_type.width, value)
            case PrimitiveKind.BOOL:
                self.write_bool(value)
            case PrimitiveKind.CHAR:
                self.write_char(value)
            case _:
                assert_never(xdr_type.kind)

    def _encoder_for(self, xdr_type: XdrType[Any]) -> Encoder[Any]:
        """ Adapt `write_value` to the `Encoder` protocol expected by compound encodings.
        """
        def encoder(_serializer: Serializer, value: Any, /) -> None:
            self.write_value(xdr_type, value)
        return encoder
