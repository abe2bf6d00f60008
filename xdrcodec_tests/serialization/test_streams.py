import io

import pytest

from xdrcodec.serialization import Deserializer, DomainViolationError, OutOfDataError, Serializer, XdrIOError


class BrokenStream(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def readinto(self, b):
        raise OSError('connection reset')

    def write(self, b):
        raise OSError('disk full')


class TrickleStream(io.RawIOBase):
    """Raw stream that hands out (and accepts) at most one byte per call."""

    def __init__(self, data: bytes = b'') -> None:
        self._data = data
        self.written = bytearray()

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def readinto(self, b):
        if not self._data or not len(b):
            return 0
        b[0] = self._data[0]
        self._data = self._data[1:]
        return 1

    def write(self, b):
        self.written += bytes(memoryview(b)[:1])
        return 1


def test_stream_serializer_writes_through() -> None:
    stream = io.BytesIO()
    se = Serializer.build_stream_serializer(stream)
    se.write_bytes(b'\x00\x01')
    se.write_byte(2)
    se.flush()
    assert se.cur_pos() == 3
    assert stream.getvalue() == b'\x00\x01\x02'


def test_stream_serializer_partial_writes() -> None:
    stream = TrickleStream()
    se = Serializer.build_stream_serializer(stream)
    se.write_bytes(b'abcd')
    assert bytes(stream.written) == b'abcd'
    assert se.cur_pos() == 4


def test_stream_serializer_has_no_finalize() -> None:
    se = Serializer.build_stream_serializer(io.BytesIO())
    with pytest.raises(TypeError):
        se.finalize()


def test_stream_serializer_wraps_os_error() -> None:
    se = Serializer.build_stream_serializer(BrokenStream())
    with pytest.raises(XdrIOError) as exc_info:
        se.write_bytes(b'x')
    assert isinstance(exc_info.value.__cause__, OSError)


def test_stream_deserializer_reads() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'\x01\x02\x03\x04\x05'))
    assert not de.is_empty()
    assert de.read_byte() == 1
    assert de.read_bytes(2) == b'\x02\x03'
    assert de.read_all() == b'\x04\x05'
    assert de.is_empty()
    de.finalize()


def test_stream_deserializer_short_reads() -> None:
    de = Deserializer.build_stream_deserializer(TrickleStream(b'abcdef'))
    assert de.read_bytes(4) == b'abcd'
    assert de.read_bytes(4, exact=False) == b'ef'
    assert de.is_empty()


def test_stream_deserializer_lookahead_is_kept() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'xy'))
    assert not de.is_empty()
    assert de.read_bytes(2) == b'xy'


def test_stream_deserializer_out_of_data() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'\x00\x00'))
    with pytest.raises(OutOfDataError):
        de.read_bytes(4)


def test_stream_deserializer_trailing_data() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'\x00'))
    with pytest.raises(DomainViolationError):
        de.finalize()


def test_stream_deserializer_wraps_os_error() -> None:
    de = Deserializer.build_stream_deserializer(BrokenStream())
    with pytest.raises(XdrIOError) as exc_info:
        de.read_byte()
    assert isinstance(exc_info.value.__cause__, OSError)


def test_bytes_serializer_copies_input() -> None:
    data = bytearray(b'ab')
    se = Serializer.build_bytes_serializer()
    se.write_bytes(data)
    data[0] = 0
    assert bytes(se.finalize()) == b'ab'


def test_bytes_deserializer() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03')
    assert de.read_byte() == 1
    with pytest.raises(OutOfDataError):
        de.read_bytes(3)
    assert bytes(de.read_bytes(3, exact=False)) == b'\x02\x03'
    with pytest.raises(ValueError):
        de.read_bytes(-1)
    de.finalize()
