"""Unit tests for the base62 codec."""

import base64
import os

import pytest

from ksuid import ALPHABET, InvalidCharacterError, InvalidLengthError, ValueTooLargeError, decode, encode


class TestEncode:
    """Tests for encode()."""

    def test_encode_reference_vector(self, sample_bytes):
        """Known bytes encode to the known text."""
        assert encode(sample_bytes) == "0ujtsYcgvSTl8PAuAdqWYSMnLOv"

    def test_encode_zero(self, zero_bytes):
        """All-zero bytes encode to 27 zero characters."""
        assert encode(zero_bytes) == "0" * 27

    def test_encode_max(self, max_bytes):
        """All-0xFF bytes encode to the maximum string."""
        assert encode(max_bytes) == "aWgEPTl1tmebfsQzFP4bxwgy80V"

    def test_encode_small_values_are_left_padded(self):
        """Low values keep leading zero characters."""
        assert encode(bytes(19) + b"\x01") == "0" * 26 + "1"
        assert encode(bytes(19) + b"\x3d") == "0" * 26 + "z"
        assert encode(bytes(19) + b"\x3e") == "0" * 25 + "10"

    def test_encode_accepts_bytearray(self, sample_bytes):
        """Any bytes-like input works."""
        assert encode(bytearray(sample_bytes)) == encode(sample_bytes)

    def test_encode_matches_integer_conversion(self):
        """Limb division agrees with plain integer base conversion."""
        for _ in range(50):
            raw = os.urandom(20)
            n = int.from_bytes(raw, "big")
            digits = []
            while n:
                n, rem = divmod(n, 62)
                digits.append(ALPHABET[rem])
            expected = "".join(reversed(digits)).rjust(27, "0")
            assert encode(raw) == expected

    @pytest.mark.parametrize("size", [0, 19, 21])
    def test_encode_wrong_length(self, size):
        """Only 20-byte input is encodable."""
        with pytest.raises(InvalidLengthError) as exc_info:
            encode(b"\x00" * size)
        assert exc_info.value.actual == size

    def test_encode_preserves_order(self):
        """Encoded text sorts like the bytes."""
        raws = sorted(os.urandom(20) for _ in range(50))
        texts = [encode(raw) for raw in raws]
        assert texts == sorted(texts)


class TestDecode:
    """Tests for decode()."""

    def test_decode_reference_vector(self):
        """Known text decodes to the known bytes."""
        out = decode("0ujtsYcgvSTl8PAuAdqWYSMnLOv")
        assert base64.b64encode(out).decode() == "Bmn377WhzTS1+Z0RVPtoUzRclzU="

    def test_decode_zero(self, zero_bytes):
        """27 zero characters decode to 20 zero bytes."""
        assert decode("0" * 27) == zero_bytes

    def test_decode_max(self, max_bytes):
        """The maximum string decodes to all-0xFF."""
        assert decode("aWgEPTl1tmebfsQzFP4bxwgy80V") == max_bytes

    def test_decode_always_20_bytes(self):
        """Output length is fixed."""
        assert len(decode("000000000000000000000000001")) == 20

    def test_round_trip_bytes(self):
        """decode(encode(b)) == b."""
        for _ in range(100):
            raw = os.urandom(20)
            assert decode(encode(raw)) == raw

    def test_round_trip_text(self):
        """encode(decode(s)) == s for in-range strings."""
        for text in ("0" * 27, "aWgEPTl1tmebfsQzFP4bxwgy80V", "1srOrx2ZWZBpBUvZwXKQmoEYga2",
                     "0ujtsYcgvSTl8PAuAdqWYSMnLOv", "ZZZZZZZZZZZZZZZZZZZZZZZZZZZ"):
            assert encode(decode(text)) == text

    @pytest.mark.parametrize("text,char,position", [
        ("$" * 27, "$", 0),
        ("0" * 26 + "*", "*", 26),
        ("0" * 10 + " " + "0" * 16, " ", 10),
        ("0" * 5 + "é" + "0" * 21, "é", 5),
    ])
    def test_decode_invalid_character(self, text, char, position):
        """Characters outside the alphabet fail on the first one."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode(text)
        assert exc_info.value.character == char
        assert exc_info.value.position == position
        assert exc_info.value.kind == "invalid-character"

    def test_decode_value_too_large(self):
        """Valid alphabet beyond 160 bits is rejected."""
        with pytest.raises(ValueTooLargeError) as exc_info:
            decode("f" * 27)
        assert exc_info.value.kind == "value-too-large"

    def test_decode_just_above_max(self):
        """One past the maximum value no longer fits."""
        with pytest.raises(ValueTooLargeError):
            decode("aWgEPTl1tmebfsQzFP4bxwgy80W")
