from ksuid.base62 import ALPHABET, decode, encode
from ksuid.entropy import SeededRandomSource, SystemRandomSource
from ksuid.errors import (
    DataCorruptedError,
    InvalidCharacterError,
    InvalidLengthError,
    KSUIDError,
    ValueTooLargeError,
)
from ksuid.identifier import KSUID, KSUID_EPOCH, generate_ksuid

__all__ = [
    "ALPHABET",
    "KSUID",
    "KSUID_EPOCH",
    "DataCorruptedError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "KSUIDError",
    "SeededRandomSource",
    "SystemRandomSource",
    "ValueTooLargeError",
    "decode",
    "encode",
    "generate_ksuid",
]
