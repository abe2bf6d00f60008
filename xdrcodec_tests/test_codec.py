from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import pytest

from xdrcodec.codec import decode_bytes, encode_bytes
from xdrcodec.conf import XdrSettings
from xdrcodec.serialization import (
    BadUnionIndexError,
    DomainViolationError,
    InvalidBoolError,
    InvalidPaddingError,
    OutOfDataError,
    TextEncodingError,
    TooLongError,
    UnknownVariantError,
    UnsupportedShapeError,
    ValueRangeError,
)
from xdrcodec.serialization.encoding.padding import PaddingPolicy
from xdrcodec.types import (
    Char,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    UnionArm,
    XdrUnion,
)
from xdrcodec.utils.result import Err, Ok
from xdrcodec_tests import unittest

LEGACY_SETTINGS = XdrSettings(PADDING_POLICY=PaddingPolicy.LEGACY)


@dataclass
class Pair:
    a: Uint32
    b: Uint8


class Color(IntEnum):
    RED = 1
    GREEN = 2
    BLUE = 5


class Figure(XdrUnion):
    __arms__ = (
        UnionArm('circle', 0, Uint32),
        UnionArm('square', 1, Uint32),
        UnionArm('empty', 2),
    )


class Reply(XdrUnion):
    __arms__ = (
        UnionArm('ok', 0, str),
        UnionArm('other', None, Int32),
    )


@dataclass
class Document:
    title: str
    tags: list[str]
    color: Color
    figure: Figure
    points: tuple[Pair, ...]
    ratio: Float64
    initial: Char
    flag: bool


class RoundTripTestCase(unittest.TestCase):
    def test_primitives(self) -> None:
        self.assertRoundTrip(Int8, -128)
        self.assertRoundTrip(Uint8, 255)
        self.assertRoundTrip(Int16, -32768)
        self.assertRoundTrip(Uint16, 65535)
        self.assertRoundTrip(Int32, -2**31)
        self.assertRoundTrip(Uint32, 2**32 - 1)
        self.assertRoundTrip(Int64, -2**63)
        self.assertRoundTrip(Uint64, 2**64 - 1)
        self.assertRoundTrip(int, 123456)
        self.assertRoundTrip(Float32, -0.25)
        self.assertRoundTrip(Float64, 3.141592653589793)
        self.assertRoundTrip(float, 1e100)
        self.assertRoundTrip(bool, True)
        self.assertRoundTrip(bool, False)
        self.assertRoundTrip(Char, 'x')

    def test_random_integers(self) -> None:
        for type_, bits, signed in [(Int16, 16, True), (Uint32, 32, False), (Int64, 64, True)]:
            for _ in range(50):
                if signed:
                    value = self.rng.randint(-2**(bits - 1), 2**(bits - 1) - 1)
                else:
                    value = self.rng.randint(0, 2**bits - 1)
                data = self.assertRoundTrip(type_, value)
                self.assertEqual(len(data), bits // 8)

    def test_text(self) -> None:
        for value in ['', 'a', 'ab', 'abc', 'abcd', 'abcde', 'ação']:
            self.assertRoundTrip(str, value)
            self.assertRoundTrip(str, value, settings=LEGACY_SETTINGS)

    def test_sequences(self) -> None:
        self.assertRoundTrip(list[Uint32], [])
        self.assertRoundTrip(list[Uint32], [1, 2, 3])
        self.assertRoundTrip(tuple[str, ...], ('a', 'bb', 'ccc'))
        self.assertRoundTrip(list[list[Int8]], [[1], [], [-1, -2]])

    def test_struct(self) -> None:
        value = Document(
            title='report',
            tags=['x', 'yy'],
            color=Color.BLUE,
            figure=Figure('square', 4),
            points=(Pair(1, 2), Pair(3, 4)),
            ratio=0.5,
            initial='R',
            flag=True,
        )
        self.assertRoundTrip(Document, value)

    def test_enum(self) -> None:
        for member in Color:
            data = self.assertRoundTrip(Color, member)
            self.assertEqual(data, int(member.value).to_bytes(4, 'big'))

    def test_union(self) -> None:
        self.assertRoundTrip(Figure, Figure('circle', 10))
        self.assertRoundTrip(Figure, Figure('empty'))
        self.assertRoundTrip(Reply, Reply('ok', 'fine'))
        self.assertRoundTrip(Reply, Reply('other', -1, selector=77))

    def test_entry_points_report_consumed_bytes(self) -> None:
        value = Pair(10, 20)
        data = encode_bytes(value).unwrap()
        self.assertEqual(decode_bytes(Pair, data), Ok((value, len(data))))


class PropertiesTestCase(unittest.TestCase):
    def test_text_padding_canonical(self) -> None:
        for length in range(10):
            data = self.encode(str, 'x' * length)
            self.assertEqual(len(data) % 4, 0)
            # smallest multiple of 4 that holds the prefix and the text
            self.assertEqual(len(data), 4 + length + (-length % 4))

    def test_text_padding_rfc4506_reference(self) -> None:
        # RFC 4506 string "abcd": length 4, no padding
        self.assertEqual(self.encode(str, 'abcd').hex(), '0000000461626364')
        self.assertEqual(self.encode(str, 'abcde').hex(), '000000056162636465000000')

    def test_text_padding_legacy(self) -> None:
        self.assertEqual(self.encode(str, 'abcd', settings=LEGACY_SETTINGS).hex(), '000000046162636400000000')
        self.assertEqual(self.encode(str, 'abc', settings=LEGACY_SETTINGS).hex(), '0000000361626300')
        self.assertEqual(self.encode(str, 'abcd', padding=PaddingPolicy.LEGACY).hex(), '000000046162636400000000')

    def test_enum_ordinal_mismatch(self) -> None:
        with self.assertRaises(UnknownVariantError):
            self.decode(Color, bytes.fromhex('00000003'))

    def test_union_selector_mismatch(self) -> None:
        with self.assertRaises(BadUnionIndexError) as cm:
            self.decode(Figure, bytes.fromhex('00000009'))
        self.assertEqual(str(cm.exception), 'bad index for union')

    def test_union_default_arm_keeps_selector(self) -> None:
        data = self.encode(Reply, Reply('other', 7, selector=9))
        self.assertEqual(data.hex(), '0000000900000007')
        value = self.decode(Reply, data)
        self.assertEqual(value.arm, 'other')
        self.assertEqual(value.selector, 9)
        self.assertEqual(self.encode(Reply, value), data)

    def test_sequence_of_three(self) -> None:
        data = self.encode(list[Uint32], [7, 8, 9])
        self.assertEqual(len(data), 16)
        self.assertEqual(data.hex(), '00000003000000070000000800000009')
        self.assertEqual(self.decode(list[Uint32], data), [7, 8, 9])

    def test_bool_domain(self) -> None:
        self.assertIs(self.decode(bool, b'\x00'), False)
        self.assertIs(self.decode(bool, b'\x01'), True)
        with self.assertRaises(InvalidBoolError):
            self.decode(bool, b'\x02')

    def test_struct_field_order(self) -> None:
        data = self.encode(Pair, Pair(a=0x01020304, b=0x05))
        self.assertEqual(data.hex(), '0102030405')


@pytest.mark.parametrize(
    ['type_', 'data', 'error'],
    [
        (Uint32, b'\x00\x01', OutOfDataError),
        (str, bytes.fromhex('00000003616263'), OutOfDataError),
        (str, bytes.fromhex('0000000361626301'), InvalidPaddingError),
        (bool, b'\x07', InvalidBoolError),
        (Color, bytes.fromhex('ffffffff'), UnknownVariantError),
        (Figure, bytes.fromhex('00000003'), BadUnionIndexError),
        (list[Uint8], bytes.fromhex('0000000201'), OutOfDataError),
        (Optional[Uint32], bytes.fromhex('00000000'), UnsupportedShapeError),
        (bytes, bytes.fromhex('00000000'), UnsupportedShapeError),
        (dict[str, int], bytes.fromhex('00000000'), UnsupportedShapeError),
        (tuple[int, str], bytes.fromhex('00000000'), UnsupportedShapeError),
        (complex, bytes.fromhex('00000000'), UnsupportedShapeError),
    ]
)
def test_decode_errors(type_, data, error):
    result = decode_bytes(type_, data)
    assert isinstance(result, Err)
    assert isinstance(result.err(), error)


@pytest.mark.parametrize(
    ['type_', 'value', 'error'],
    [
        (Uint8, 256, ValueRangeError),
        (Int8, -129, ValueRangeError),
        (Uint32, -1, ValueRangeError),
        (Float32, 1e300, ValueRangeError),
        (Uint32, 'x', DomainViolationError),
        (Uint32, True, DomainViolationError),
        (bool, 1, DomainViolationError),
        (Char, 'ab', DomainViolationError),
        (str, 'π', TextEncodingError),
        (list[Uint8], [1, 300], ValueRangeError),
        (list[Uint8], {1, 2}, DomainViolationError),
        (Color, 1, DomainViolationError),
        (Pair, (1, 2), DomainViolationError),
        (Optional[int], None, UnsupportedShapeError),
        (bytes, b'abc', UnsupportedShapeError),
        (dict[str, int], {}, UnsupportedShapeError),
        (list, [], UnsupportedShapeError),
    ]
)
def test_encode_errors(type_, value, error):
    result = encode_bytes(value, type_=type_)
    assert isinstance(result, Err)
    assert isinstance(result.err(), error)


def test_encode_infers_type_from_value():
    assert encode_bytes(Pair(1, 2)) == Ok(bytes.fromhex('0000000102'))
    assert encode_bytes(Color.GREEN) == Ok(bytes.fromhex('00000002'))
    assert encode_bytes(Figure('empty')) == Ok(bytes.fromhex('00000002'))
    assert encode_bytes('hi') == Ok(bytes.fromhex('0000000268690000'))
    assert encode_bytes(-1) == Ok(bytes.fromhex('ffffffff'))
    # the element type of a bare list is unknown
    assert isinstance(encode_bytes([1, 2]).err(), UnsupportedShapeError)


def test_decode_bytes_strict():
    data = bytes.fromhex('00000001ff')
    assert decode_bytes(Uint32, data) == Ok((1, 4))
    result = decode_bytes(Uint32, data, strict=True)
    assert isinstance(result.err(), DomainViolationError)


def test_text_encoding_setting():
    settings = XdrSettings(TEXT_ENCODING='utf-8')
    assert encode_bytes('π', settings=settings) == Ok(bytes.fromhex('00000002cf800000'))
    assert decode_bytes(str, bytes.fromhex('00000002cf800000'), settings=settings) == Ok(('π', 8))


def test_length_limits():
    settings = XdrSettings(MAX_TEXT_LENGTH=2, MAX_SEQUENCE_LENGTH=2)
    assert isinstance(decode_bytes(str, bytes.fromhex('0000000361626300'), settings=settings).err(), TooLongError)
    assert isinstance(encode_bytes('abc', settings=settings).err(), TooLongError)
    three = bytes.fromhex('00000003010203')
    assert isinstance(decode_bytes(list[Uint8], three, settings=settings).err(), TooLongError)
    assert isinstance(encode_bytes([1, 2, 3], type_=list[Uint8], settings=settings).err(), TooLongError)
    assert decode_bytes(list[Uint8], bytes.fromhex('000000020102'), settings=settings) == Ok(([1, 2], 6))


def test_lenient_padding():
    data = bytes.fromhex('0000000361626301')
    assert isinstance(decode_bytes(str, data).err(), InvalidPaddingError)
    assert decode_bytes(str, data, settings=XdrSettings(STRICT_PADDING=False)) == Ok(('abc', 8))


@dataclass
class Empty:
    pass


class Mode(int, Enum):
    READ = 1
    WRITE = 2


def test_empty_struct_sequence_is_rejected():
    # a count of 10 million elements that would each take no bytes
    result = decode_bytes(list[Empty], bytes.fromhex('00989680'))
    assert isinstance(result.err(), UnsupportedShapeError)
    assert isinstance(encode_bytes(Empty()).err(), UnsupportedShapeError)


def test_mixed_in_enum_is_rejected():
    assert isinstance(encode_bytes(Mode.READ).err(), UnsupportedShapeError)
    assert isinstance(decode_bytes(Mode, bytes.fromhex('00000001')).err(), UnsupportedShapeError)
