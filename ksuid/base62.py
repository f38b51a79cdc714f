"""
Base62 codec for KSUIDs.

Converts between 20 raw bytes (five big-endian 32-bit limbs) and the fixed
27 character base62 text form using long division across limbs, so no
160-bit integer arithmetic is needed.
"""

import struct

from ksuid.errors import InvalidCharacterError, InvalidLengthError, ValueTooLargeError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ENCODED_LENGTH = 27
DECODED_LENGTH = 20

_LIMB_BASE = 1 << 32
_DIGIT_BASE = 62
_ZERO = ALPHABET[0]

_LIMBS = struct.Struct(">5I")
_LIMB = struct.Struct(">I")

_DIGIT_VALUES = {char: index for index, char in enumerate(ALPHABET)}


def _divide(digits, src_base, dst_base):
    """Long-divide a big-endian digit list by dst_base.

    Returns (quotient digits with leading zeros stripped, remainder).
    """
    quotient = []
    remainder = 0
    for digit in digits:
        value = digit + remainder * src_base
        q, remainder = divmod(value, dst_base)
        if quotient or q:
            quotient.append(q)
    return quotient, remainder


def encode(source):
    """Encode 20 bytes as a 27 character base62 string."""
    source = bytes(source)
    if len(source) != DECODED_LENGTH:
        raise InvalidLengthError(DECODED_LENGTH, len(source))
    limbs = list(_LIMBS.unpack(source))
    out = [_ZERO] * ENCODED_LENGTH
    n = ENCODED_LENGTH

    while limbs:
        limbs, remainder = _divide(limbs, _LIMB_BASE, _DIGIT_BASE)
        n -= 1
        out[n] = ALPHABET[remainder]

    return "".join(out)


def decode(source):
    """Decode a base62 string into 20 bytes.

    Raises InvalidCharacterError on the first character outside the alphabet
    and ValueTooLargeError if the value does not fit in 160 bits.
    """
    digits = []
    for position, char in enumerate(source):
        value = _DIGIT_VALUES.get(char)
        if value is None:
            raise InvalidCharacterError(char, position)
        digits.append(value)

    out = bytearray(DECODED_LENGTH)
    n = DECODED_LENGTH

    while digits:
        digits, remainder = _divide(digits, _DIGIT_BASE, _LIMB_BASE)
        if n < _LIMB.size:
            raise ValueTooLargeError(source)
        _LIMB.pack_into(out, n - _LIMB.size, remainder)
        n -= _LIMB.size

    return bytes(out)
