import pytest

from xdrcodec.serialization import Deserializer, Serializer, TooLongError
from xdrcodec.serialization.adapters import CountingDeserializer, MaxBytesExceededError


def test_max_bytes_serializer() -> None:
    se = Serializer.build_bytes_serializer().with_limit(3)
    se.write_bytes(b'ab')
    se.write_byte(0x63)
    with pytest.raises(MaxBytesExceededError):
        se.write_byte(0x64)
    assert bytes(se.finalize()) == b'abc'


def test_max_bytes_deserializer() -> None:
    de = Deserializer.build_bytes_deserializer(b'abcdef').with_limit(4)
    assert bytes(de.read_bytes(2)) == b'ab'
    with pytest.raises(MaxBytesExceededError):
        de.read_bytes(3)


def test_max_bytes_read_all() -> None:
    de = Deserializer.build_bytes_deserializer(b'abc').with_limit(3)
    assert bytes(de.read_all()) == b'abc'

    de = Deserializer.build_bytes_deserializer(b'abcd').with_limit(3)
    with pytest.raises(MaxBytesExceededError):
        de.read_all()


def test_max_bytes_is_too_long() -> None:
    assert issubclass(MaxBytesExceededError, TooLongError)


def test_optional_max_bytes() -> None:
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_limit(None) is de
    se = Serializer.build_bytes_serializer()
    assert se.with_limit(None) is se


def test_counting_deserializer() -> None:
    de = CountingDeserializer(Deserializer.build_bytes_deserializer(b'\x00\x01\x02\x03\x04\x05'))
    assert de.bytes_read == 0
    de.read_byte()
    de.read_bytes(2)
    assert de.bytes_read == 3
    de.read_bytes(10, exact=False)
    assert de.bytes_read == 6
    assert de.is_empty()
    de.finalize()
