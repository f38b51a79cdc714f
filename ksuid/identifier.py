"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

import math
import struct
import time
from datetime import datetime, timezone
from functools import total_ordering

from ksuid import base62
from ksuid.entropy import SystemRandomSource, draw_payload
from ksuid.errors import DataCorruptedError, InvalidLengthError, KSUIDError

# KSUID epoch: 2014-05-13T16:53:20Z
KSUID_EPOCH = 1400000000
BYTE_LENGTH = base62.DECODED_LENGTH
STRING_LENGTH = base62.ENCODED_LENGTH
TIMESTAMP_LENGTH = 4
PAYLOAD_LENGTH = BYTE_LENGTH - TIMESTAMP_LENGTH

_TIMESTAMP = struct.Struct(">I")
_system_random = SystemRandomSource()


def _unix_seconds(timestamp):
    if timestamp is None:
        return math.floor(time.time())
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return math.floor(timestamp.timestamp())
    return math.floor(timestamp)


@total_ordering
class KSUID:
    """Immutable 20-byte identifier ordered by creation second."""

    __slots__ = ("_bytes",)

    NIL = None
    MAX = None

    def __init__(self, data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
        data = bytes(data)
        if len(data) != BYTE_LENGTH:
            raise InvalidLengthError(BYTE_LENGTH, len(data))
        object.__setattr__(self, "_bytes", data)

    @classmethod
    def generate(cls, timestamp=None, random_source=None):
        """Create a KSUID for `timestamp` (datetime or Unix seconds, default now).

        Naive datetimes are read as UTC.
        Seconds outside [KSUID_EPOCH, KSUID_EPOCH + 2**32) wrap modulo 2**32
        rather than raising.
        """
        raw = (_unix_seconds(timestamp) - KSUID_EPOCH) & 0xFFFFFFFF
        payload = draw_payload(random_source or _system_random, PAYLOAD_LENGTH)
        return cls(_TIMESTAMP.pack(raw) + payload)

    @classmethod
    def parse(cls, text):
        """Parse the 27 character text form."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        if len(text) != STRING_LENGTH:
            raise InvalidLengthError(STRING_LENGTH, len(text), what="characters")
        return cls(base62.decode(text))

    @classmethod
    def from_bytes(cls, data):
        return cls(data)

    @classmethod
    def deserialize(cls, text):
        """Parse `text` from interchange data, hiding the failure details."""
        try:
            return cls.parse(text)
        except (KSUIDError, TypeError):
            raise DataCorruptedError() from None

    def serialize(self):
        return str(self)

    @property
    def bytes(self):
        return self._bytes

    @property
    def raw_timestamp(self):
        return _TIMESTAMP.unpack_from(self._bytes)[0]

    @property
    def timestamp(self):
        return datetime.fromtimestamp(self.raw_timestamp + KSUID_EPOCH, tz=timezone.utc)

    @property
    def payload(self):
        return self._bytes[TIMESTAMP_LENGTH:]

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bytes__(self):
        return self._bytes

    def __str__(self):
        return base62.encode(self._bytes)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, KSUID):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, KSUID):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def __reduce__(self):
        return (type(self), (self._bytes,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._validate_field,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _validate_field(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.deserialize(value)
        raise DataCorruptedError()

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return {"type": "string", "minLength": STRING_LENGTH, "maxLength": STRING_LENGTH,
                "pattern": "^[0-9A-Za-z]+$"}


KSUID.NIL = KSUID(bytes(BYTE_LENGTH))
KSUID.MAX = KSUID(b"\xff" * BYTE_LENGTH)


def generate_ksuid():
    """Generate a 27-character sortable unique ID."""
    return str(KSUID.generate())
