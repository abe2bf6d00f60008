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
Public entry points.

Every function here returns a `Result`: `Ok` with the outcome, or `Err` with the `SerializationError` that aborted the
operation. Nothing else is caught, a bug still raises.

>>> from dataclasses import dataclass
>>> from xdrcodec.types import Uint8, Uint32
>>> @dataclass
... class Entry:
...     id: Uint32
...     flags: Uint8
...     name: str
>>> encode_bytes(Entry(7, 1, 'abc')).map(bytes.hex)
Ok('00000007010000000361626300')
>>> decode_bytes(Entry, bytes.fromhex('00000007010000000361626300'))
Ok((Entry(id=7, flags=1, name='abc'), 13))
>>> decode_bytes(bool, b'\\x02')
Err(InvalidBoolError('boolean byte must be 0 or 1, got 0x02'))
"""

from typing import Any, BinaryIO, TypeVar

from structlog import get_logger

from xdrcodec.conf import XdrSettings
from xdrcodec.decoder import XdrDecoder
from xdrcodec.encoder import XdrEncoder
from xdrcodec.serialization import Deserializer, SerializationError, Serializer
from xdrcodec.serialization.types import Buffer
from xdrcodec.utils.result import Result, as_result
from xdrcodec.xdr_types import XdrType, make_xdr_type, xdr_type_for_value

logger = get_logger()

T = TypeVar('T')

Sink = Serializer | BinaryIO
Source = Deserializer | BinaryIO


def _resolve_type(type_: Any) -> XdrType[Any]:
    if isinstance(type_, XdrType):
        return type_
    return make_xdr_type(type_)


def _as_serializer(sink: Sink) -> Serializer:
    if isinstance(sink, Serializer):
        return sink
    return Serializer.build_stream_serializer(sink)


def _as_deserializer(source: Source) -> Deserializer:
    if isinstance(source, Deserializer):
        return source
    return Deserializer.build_stream_deserializer(source)


def _encode(serializer: Serializer, value: Any, type_: Any, settings: XdrSettings | None) -> int:
    encoder = XdrEncoder(serializer, settings=settings)
    try:
        xdr_type = xdr_type_for_value(value) if type_ is None else _resolve_type(type_)
        encoder.write_value(xdr_type, value)
    except SerializationError as e:
        encoder.log.debug('encode failed', error=repr(e), bytes_written=encoder.bytes_written)
        raise
    return encoder.bytes_written


def _decode(deserializer: Deserializer, type_: Any, settings: XdrSettings | None) -> tuple[Any, int]:
    decoder = XdrDecoder(deserializer, settings=settings)
    try:
        value = decoder.read_value(_resolve_type(type_))
    except SerializationError as e:
        decoder.log.debug('decode failed', error=repr(e), bytes_consumed=decoder.bytes_consumed)
        raise
    return value, decoder.bytes_consumed


@as_result(SerializationError)
def encode_to(value: Any, sink: Sink, *, type_: Any = None, settings: XdrSettings | None = None) -> int:
    """ Encode `value` into a serializer or a binary stream and return how many bytes were written.

    `type_` is an annotation (or an `XdrType`), when omitted it is taken from the value's class.
    """
    serializer = _as_serializer(sink)
    bytes_written = _encode(serializer, value, type_, settings)
    serializer.flush()
    return bytes_written


@as_result(SerializationError)
def encode_bytes(value: Any, *, type_: Any = None, settings: XdrSettings | None = None) -> bytes:
    """ Encode `value` into a new `bytes` object.
    """
    serializer = Serializer.build_bytes_serializer()
    _encode(serializer, value, type_, settings)
    return bytes(serializer.finalize())


@as_result(SerializationError)
def decode_from(
    type_: Any,
    source: Source,
    *,
    max_bytes: int | None = None,
    settings: XdrSettings | None = None,
) -> tuple[Any, int]:
    """ Decode one value of `type_` from a deserializer or a binary stream, returns `(value, bytes_consumed)`.

    Bytes after the value are left in the source. With `max_bytes` decoding fails as soon as it would need more than
    that many bytes.
    """
    deserializer = _as_deserializer(source).with_limit(max_bytes)
    return _decode(deserializer, type_, settings)


@as_result(SerializationError)
def decode_bytes(
    type_: Any,
    data: Buffer,
    *,
    strict: bool = False,
    settings: XdrSettings | None = None,
) -> tuple[Any, int]:
    """ Decode one value of `type_` from the start of `data`, returns `(value, bytes_consumed)`.

    With `strict=True`, bytes left after the value are an error.
    """
    deserializer = Deserializer.build_bytes_deserializer(data)
    value, bytes_consumed = _decode(deserializer, type_, settings)
    if strict:
        deserializer.finalize()
    return value, bytes_consumed


@as_result(SerializationError)
def decode_any(source: Source, *, settings: XdrSettings | None = None) -> Any:
    """ Schema-free decoding, XDR does not carry type information so this always fails with `UnsupportedShapeError`.
    """
    XdrDecoder(_as_deserializer(source), settings=settings).read_any()
