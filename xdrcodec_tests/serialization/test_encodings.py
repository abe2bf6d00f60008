import math

import pytest

from xdrcodec.serialization import (
    Deserializer,
    InvalidBoolError,
    InvalidPaddingError,
    OutOfDataError,
    Serializer,
    TextEncodingError,
    TooLongError,
    ValueRangeError,
)
from xdrcodec.serialization.encoding.bool import decode_bool
from xdrcodec.serialization.encoding.char import decode_char, encode_char
from xdrcodec.serialization.encoding.float import decode_float, encode_float
from xdrcodec.serialization.encoding.int import decode_int, encode_int
from xdrcodec.serialization.encoding.padding import PaddingPolicy, padding_length, skip_padding
from xdrcodec.serialization.encoding.text import decode_text, encode_text


@pytest.mark.parametrize(
    ['value', 'length', 'signed', 'expected'],
    [
        (0, 4, True, '00000000'),
        (1, 4, True, '00000001'),
        (-1, 4, True, 'ffffffff'),
        (2**31 - 1, 4, True, '7fffffff'),
        (-2**31, 4, True, '80000000'),
        (2**32 - 1, 4, False, 'ffffffff'),
        (2**63 - 1, 8, True, '7fffffffffffffff'),
        (-2**63, 8, True, '8000000000000000'),
        (2**64 - 1, 8, False, 'ffffffffffffffff'),
        (-128, 1, True, '80'),
        (65535, 2, False, 'ffff'),
    ]
)
def test_int(value: int, length: int, signed: bool, expected: str) -> None:
    se = Serializer.build_bytes_serializer()
    encode_int(se, value, length=length, signed=signed)
    assert bytes(se.finalize()).hex() == expected
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(expected))
    assert decode_int(de, length=length, signed=signed) == value
    de.finalize()


@pytest.mark.parametrize(
    ['value', 'length', 'signed'],
    [
        (2**31, 4, True),
        (-2**31 - 1, 4, True),
        (2**32, 4, False),
        (-1, 4, False),
        (2**64, 8, False),
        (-2**63 - 1, 8, True),
    ]
)
def test_int_out_of_range(value: int, length: int, signed: bool) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueRangeError):
        encode_int(se, value, length=length, signed=signed)
    assert se.cur_pos() == 0


def test_int_out_of_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00')
    with pytest.raises(OutOfDataError):
        decode_int(de, length=4, signed=True)


@pytest.mark.parametrize(
    ['value', 'length', 'expected'],
    [
        (0.0, 4, '00000000'),
        (1.0, 4, '3f800000'),
        (-2.5, 4, 'c0200000'),
        (1.0, 8, '3ff0000000000000'),
        (math.inf, 8, '7ff0000000000000'),
        (-math.inf, 4, 'ff800000'),
    ]
)
def test_float(value: float, length: int, expected: str) -> None:
    se = Serializer.build_bytes_serializer()
    encode_float(se, value, length=length)
    assert bytes(se.finalize()).hex() == expected
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(expected))
    assert decode_float(de, length=length) == value


def test_float_nan() -> None:
    se = Serializer.build_bytes_serializer()
    encode_float(se, math.nan, length=8)
    de = Deserializer.build_bytes_deserializer(se.finalize())
    assert math.isnan(decode_float(de, length=8))


def test_float_overflow() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueRangeError):
        encode_float(se, 1e39, length=4)


def test_float_bad_length() -> None:
    with pytest.raises(ValueError):
        encode_float(Serializer.build_bytes_serializer(), 1.0, length=2)


@pytest.mark.parametrize('raw', [2, 3, 0x80, 0xff])
def test_bool_invalid(raw: int) -> None:
    de = Deserializer.build_bytes_deserializer(bytes([raw]))
    with pytest.raises(InvalidBoolError):
        decode_bool(de)


def test_char() -> None:
    se = Serializer.build_bytes_serializer()
    encode_char(se, 'é')
    assert bytes(se.finalize()) == b'\xe9'
    de = Deserializer.build_bytes_deserializer(b'\xe9')
    assert decode_char(de) == 'é'


@pytest.mark.parametrize(['value', 'encoding'], [('', 'latin-1'), ('ab', 'latin-1'), ('€', 'latin-1'), ('é', 'utf-8')])
def test_char_invalid(value: str, encoding: str) -> None:
    with pytest.raises(TextEncodingError):
        encode_char(Serializer.build_bytes_serializer(), value, encoding=encoding)


def test_char_invalid_decode() -> None:
    de = Deserializer.build_bytes_deserializer(b'\xff')
    with pytest.raises(TextEncodingError):
        decode_char(de, encoding='ascii')


@pytest.mark.parametrize('length', range(12))
def test_padding_length(length: int) -> None:
    canonical = padding_length(length, PaddingPolicy.CANONICAL)
    legacy = padding_length(length, PaddingPolicy.LEGACY)
    assert (length + canonical) % 4 == 0
    assert (length + legacy) % 4 == 0
    assert 0 <= canonical < 4
    assert 0 < legacy <= 4
    assert legacy == (canonical or 4)


def test_lenient_padding() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03')
    assert skip_padding(de, 1, PaddingPolicy.CANONICAL, strict=False) == 3
    de.finalize()


def test_padding_policy_from_string() -> None:
    assert PaddingPolicy('legacy') is PaddingPolicy.LEGACY
    assert PaddingPolicy('canonical') is PaddingPolicy.CANONICAL


@pytest.mark.parametrize('policy', list(PaddingPolicy))
@pytest.mark.parametrize('value', ['', 'a', 'ab', 'abc', 'abcd', 'abcdefgh', 'ñandú'])
def test_text_alignment(policy: PaddingPolicy, value: str) -> None:
    se = Serializer.build_bytes_serializer()
    encode_text(se, value, padding=policy)
    data = bytes(se.finalize())
    assert len(data) % 4 == 0
    assert data[:4] == len(value).to_bytes(4, 'big')
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_text(de, padding=policy) == value
    de.finalize()


def test_text_utf8_counts_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    encode_text(se, 'ñ', encoding='utf-8')
    assert bytes(se.finalize()).hex() == '00000002c3b10000'


def test_text_wrong_policy_leaves_bytes() -> None:
    se = Serializer.build_bytes_serializer()
    encode_text(se, 'abcd', padding=PaddingPolicy.LEGACY)
    data = bytes(se.finalize())
    de = Deserializer.build_bytes_deserializer(data)
    assert decode_text(de, padding=PaddingPolicy.CANONICAL) == 'abcd'
    assert bytes(de.read_all()) == b'\x00\x00\x00\x00'


def test_text_errors() -> None:
    with pytest.raises(TextEncodingError):
        encode_text(Serializer.build_bytes_serializer(), '€')
    with pytest.raises(TooLongError):
        encode_text(Serializer.build_bytes_serializer(), 'abc', max_length=2)
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('00000002ffff0000'))
    with pytest.raises(TextEncodingError):
        decode_text(de, encoding='utf-8')
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000161000100'))
    with pytest.raises(InvalidPaddingError):
        decode_text(de)
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000161000100'))
    assert decode_text(de, strict_padding=False) == 'a'
