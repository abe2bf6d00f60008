import secrets
import unittest
from random import Random
from typing import Any, Optional

from structlog import get_logger

from xdrcodec.conf import get_global_settings, reset_global_settings
from xdrcodec.decoder import XdrDecoder
from xdrcodec.encoder import XdrEncoder
from xdrcodec.serialization import Deserializer, Serializer
from xdrcodec.xdr_types import XdrType, make_xdr_type

logger = get_logger()


class TestCase(unittest.TestCase):
    seed_config: Optional[int] = None

    def setUp(self) -> None:
        self.log = logger.new()
        self.seed = secrets.randbits(64) if self.seed_config is None else self.seed_config
        self.log.info('set seed', seed=self.seed)
        self.rng = Random(self.seed)
        reset_global_settings()
        self._settings = get_global_settings()

    def tearDown(self) -> None:
        reset_global_settings()

    def encode(self, type_: Any, value: Any, **kwargs: Any) -> bytes:
        """Encode with a fresh XdrEncoder, errors are raised."""
        xdr_type = type_ if isinstance(type_, XdrType) else make_xdr_type(type_)
        serializer = Serializer.build_bytes_serializer()
        encoder = XdrEncoder(serializer, **kwargs)
        encoder.write_value(xdr_type, value)
        data = bytes(serializer.finalize())
        self.assertEqual(encoder.bytes_written, len(data))
        return data

    def decode(self, type_: Any, data: bytes, **kwargs: Any) -> Any:
        """Decode all of `data` with a fresh XdrDecoder, errors are raised."""
        xdr_type = type_ if isinstance(type_, XdrType) else make_xdr_type(type_)
        deserializer = Deserializer.build_bytes_deserializer(data)
        decoder = XdrDecoder(deserializer, **kwargs)
        value = decoder.read_value(xdr_type)
        self.assertEqual(decoder.bytes_consumed, len(data))
        deserializer.finalize()
        return value

    def assertRoundTrip(self, type_: Any, value: Any, **kwargs: Any) -> bytes:
        data = self.encode(type_, value, **kwargs)
        self.assertEqual(self.decode(type_, data, **kwargs), value)
        return data
